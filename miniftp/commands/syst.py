# Siempre la misma respuesta: es la que mejor toleran los clientes
SYSTEM_INFO = "UNIX Type: L8"


def handle_syst(command, session):
    """Maneja comando SYST - información del sistema."""
    return 215, SYSTEM_INFO
