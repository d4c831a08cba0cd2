# Formas aceptadas -> modo binario
TRANSFER_TYPES = {
    "A": False,
    "A N": False,
    "I": True,
    "L 8": True,
}


def handle_type(command, session):
    """Maneja comando TYPE - ASCII (A, A N) o binario (I, L 8)."""
    if not 1 <= command.arg_count() <= 2:
        return 501, "Usage: TYPE takes 1 or 2 arguments."

    type_code = command.joined_args()
    if type_code not in TRANSFER_TYPES:
        return 504, "Unsupported type. Supported types: A, A N, I, L 8."

    session.binary = TRANSFER_TYPES[type_code]
    session.logger.info("Transfer type for %s set to %s", session.client_address, type_code)
    return 200, "TYPE set"
