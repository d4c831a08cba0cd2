def handle_user(command, session):
    """Maneja comando USER - se acepta cualquier usuario, sin contraseña."""
    session.logger.info("User %s logged in from %s", command.get_arg(0), session.client_address)
    return 230, "Login successful."
