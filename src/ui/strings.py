"""Internationalisation strings for the console menu and Streamlit UI.

Provides English (en) and Portuguese (pt) translations for all
user-facing labels and messages.
"""

from typing import Dict

# ---------------------------------------------------------------------------
# English strings
# ---------------------------------------------------------------------------

_STRINGS_EN: Dict[str, str] = {
    # Titles
    "page_title": "Triage Desk",
    "app_title": "EMERGENCY ROOM PRIORITY MANAGEMENT SYSTEM",
    "welcome": "Welcome to the Emergency Room Priority Manager!",
    "welcome_hint": (
        "Cases are automatically sorted by priority level "
        "(5=Critical, 1=Minimal)"
    ),
    "goodbye": "Thank you for using ER Priority Manager. Stay safe!",
    # Menu
    "menu_title": "MAIN MENU",
    "menu_add": "Add New Case",
    "menu_serve": "Serve Next Case (Priority)",
    "menu_queue": "View Waiting Queue",
    "menu_served": "View Served Cases",
    "menu_dashboard": "View Dashboard",
    "menu_exit": "Exit",
    "menu_prompt": "Enter choice: ",
    "menu_invalid": "Invalid choice! Please try again.",
    # Intake
    "prompt_label": "Enter case name: ",
    "prompt_priority": "Enter priority (1-5, where 5=Critical): ",
    "prompt_description": "Enter condition/symptoms: ",
    "invalid_priority": "Invalid priority! Must be 1-5.",
    "label_required": "Case name is required.",
    "case_added": "Case Added!",
    # Serving
    "now_serving": "NOW SERVING:",
    "queue_clear": "No cases waiting. ER is clear!",
    # Tables
    "col_id": "ID",
    "col_label": "Name",
    "col_priority": "Priority",
    "col_description": "Condition",
    "col_time": "Time",
    "col_wait": "Waited",
    "field_id": "ID",
    "field_label": "Name",
    "field_priority": "Priority",
    "field_description": "Condition",
    "field_time": "Time",
    "field_wait": "Waited",
    "waiting_header": "WAITING QUEUE ({count} cases)",
    "waiting_empty": "Waiting Queue: Empty",
    "served_header": "SERVED CASES ({count} total)",
    "served_empty": "Served Cases: None yet",
    # Dashboard
    "stats_header": "STATISTICS:",
    "stat_waiting": "Cases Waiting",
    "stat_served": "Cases Served",
    "stat_total": "Total Processed",
    "stat_avg_wait": "Average Wait",
    "stat_longest_wait": "Longest Wait",
    "stat_by_level": "Served by Priority",
    "next_case_header": "NEXT PRIORITY CASE:",
    "not_available": "n/a",
    # Streamlit
    "sidebar_header": "Triage Desk",
    "language_label": "Idioma / Language",
    "load_samples": "Load sample waiting room",
    "samples_loaded": "{count} sample cases added.",
    "reset_desk": "Reset desk",
    "intake_header": "New case",
    "submit_button": "Add to queue",
    "serve_button": "Serve next case",
    "dashboard_header": "Dashboard",
    # Priority level names
    "level_critical": "CRITICAL",
    "level_severe": "SEVERE",
    "level_moderate": "MODERATE",
    "level_minor": "MINOR",
    "level_minimal": "MINIMAL",
    "level_unknown": "UNKNOWN",
}

# ---------------------------------------------------------------------------
# Portuguese strings
# ---------------------------------------------------------------------------

_STRINGS_PT: Dict[str, str] = {
    # Titles
    "page_title": "Mesa de Triagem",
    "app_title": "SISTEMA DE GESTÃO DE PRIORIDADES DO PRONTO-SOCORRO",
    "welcome": "Bem-vindo ao Gerenciador de Prioridades do Pronto-Socorro!",
    "welcome_hint": (
        "Os casos são ordenados automaticamente pelo nível de prioridade "
        "(5=Crítico, 1=Mínimo)"
    ),
    "goodbye": "Obrigado por usar o Gerenciador de Prioridades. Cuide-se!",
    # Menu
    "menu_title": "MENU PRINCIPAL",
    "menu_add": "Adicionar novo caso",
    "menu_serve": "Atender próximo caso (prioridade)",
    "menu_queue": "Ver fila de espera",
    "menu_served": "Ver casos atendidos",
    "menu_dashboard": "Ver painel",
    "menu_exit": "Sair",
    "menu_prompt": "Escolha uma opção: ",
    "menu_invalid": "Opção inválida! Tente novamente.",
    # Intake
    "prompt_label": "Nome do caso: ",
    "prompt_priority": "Prioridade (1-5, onde 5=Crítico): ",
    "prompt_description": "Condição/sintomas: ",
    "invalid_priority": "Prioridade inválida! Deve ser de 1 a 5.",
    "label_required": "O nome do caso é obrigatório.",
    "case_added": "Caso adicionado!",
    # Serving
    "now_serving": "EM ATENDIMENTO:",
    "queue_clear": "Nenhum caso aguardando. Pronto-socorro livre!",
    # Tables
    "col_id": "ID",
    "col_label": "Nome",
    "col_priority": "Prioridade",
    "col_description": "Condição",
    "col_time": "Hora",
    "col_wait": "Espera",
    "field_id": "ID",
    "field_label": "Nome",
    "field_priority": "Prioridade",
    "field_description": "Condição",
    "field_time": "Hora",
    "field_wait": "Espera",
    "waiting_header": "FILA DE ESPERA ({count} casos)",
    "waiting_empty": "Fila de espera: vazia",
    "served_header": "CASOS ATENDIDOS ({count} no total)",
    "served_empty": "Casos atendidos: nenhum ainda",
    # Dashboard
    "stats_header": "ESTATÍSTICAS:",
    "stat_waiting": "Casos aguardando",
    "stat_served": "Casos atendidos",
    "stat_total": "Total processado",
    "stat_avg_wait": "Espera média",
    "stat_longest_wait": "Maior espera",
    "stat_by_level": "Atendidos por prioridade",
    "next_case_header": "PRÓXIMO CASO PRIORITÁRIO:",
    "not_available": "n/d",
    # Streamlit
    "sidebar_header": "Mesa de Triagem",
    "language_label": "Idioma / Language",
    "load_samples": "Carregar sala de espera de exemplo",
    "samples_loaded": "{count} casos de exemplo adicionados.",
    "reset_desk": "Reiniciar mesa",
    "intake_header": "Novo caso",
    "submit_button": "Adicionar à fila",
    "serve_button": "Atender próximo caso",
    "dashboard_header": "Painel",
    # Priority level names
    "level_critical": "CRÍTICO",
    "level_severe": "GRAVE",
    "level_moderate": "MODERADO",
    "level_minor": "LEVE",
    "level_minimal": "MÍNIMO",
    "level_unknown": "DESCONHECIDO",
}


def get_strings(lang: str) -> Dict[str, str]:
    """Return the string dictionary for the given language code.

    Args:
        lang: Language code, either ``"en"`` or ``"pt"``.

    Returns:
        Dictionary mapping string keys to localised text.
    """
    if lang == "pt":
        return _STRINGS_PT
    return _STRINGS_EN
