def handle_mode(command, session):
    """Maneja comando MODE - solo modo stream (S)."""
    if not command.require_args(1):
        return 501, "Usage: MODE S"

    if command.get_arg(0).upper() != "S":
        return 504, "Only stream mode is supported"

    return 200, "MODE set"
