from miniftp.entities.address_codec import AddressError


def handle_port(command, session):
    """Maneja comando PORT - registra la dirección del cliente para conectar
    al iniciar la próxima transferencia."""
    if not command.require_args(1):
        session.data_channel.release()
        return 501, "Usage: PORT a,b,c,d,p1,p2"

    try:
        session.data_channel.record_active_target(command.get_arg(0))
    except AddressError as e:
        session.log_failure(command, e)
        return 501, "Can't parse address."

    return 200, "PORT command successful."
