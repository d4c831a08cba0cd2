def handle_stru(command, session):
    """Maneja comando STRU - solo estructura de archivo (F)."""
    if not command.require_args(1):
        return 501, "Usage: STRU F"

    if command.get_arg(0).upper() != "F":
        return 504, "Only file structure is supported"

    return 200, "STRU set"
