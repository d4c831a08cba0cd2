def handle_pasv(command, session):
    """Maneja comando PASV - modo pasivo para transferencia de datos"""
    if command.arg_count() > 0:
        session.data_channel.release()
        return 501, "Too many arguments."

    # Un PORT anterior no sobrevive a un PASV, aunque este falle
    session.data_channel.release()
    try:
        local_host = session.local_host()
        address = session.data_channel.open_passive_listener(local_host)
    except OSError as e:
        session.log_failure(command, e)
        return 451, "Requested action aborted. Local error in processing."

    # Un carácter extra antes de la dirección, según recomienda DJB
    return 227, f"={address}"
