def handle_noop(command, session):
    """Maneja comando NOOP - no operation (mantener conexión activa)."""
    return 200, "Ready."
