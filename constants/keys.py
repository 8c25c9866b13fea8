class StateKeys:
    """Keys for data stored in ``st.session_state``."""

    WIZARD_KIND = "wizard_kind"
    CREATION_STATE = "character_creation_state"
    LEVEL_UP_STATE = "character_level_up_state"
    SESSION_ID = "session_id"
    LANG = "lang"


class UIKeys:
    """Keys for UI widgets in ``st.session_state``."""

    WIZARD_SELECT = "ui.wizard_select"
    CHARACTER_NAME = "ui.details.name"
