def handle_quit(command, session):
    """Maneja comando QUIT - la sesión termina después de responder."""
    session.request_quit()
    return 221, "Goodbye."
