from miniftp.entities.data_channel import DataChannelError
from miniftp.entities.transfer_engine import DataConnectionError, LocalIOError, list_path


def handle_list(command, session):
    """Maneja comando LIST - nombres de un archivo o de las entradas de un
    directorio (por defecto el directorio actual)."""
    # LIST puede tener 0 o 1 argumentos
    if command.arg_count() > 1:
        return 501, "Too many arguments."

    target = command.get_arg(0, ".")
    if not session.file_system.exists(target):
        session.log_failure(command, f"{target!r} not found")
        return 550, "File not found."

    session.send_response(150, "Here comes the directory listing.")

    try:
        data_conn = session.open_data_connection()
    except DataChannelError as e:
        session.log_failure(command, e)
        return 425, "Can't open data connection."

    try:
        count = list_path(session.file_system, target, data_conn, session.line_ending())
    except LocalIOError as e:
        session.log_failure(command, e)
        return 450, "Requested file action not taken. File unavailable."
    except DataConnectionError as e:
        session.log_failure(command, e)
        return 426, "Connection closed: transfer aborted."
    finally:
        data_conn.close()

    session.logger.info("LIST %s sent %d entries to %s", target, count, session.client_address)
    return 226, "Closing data connection. List successful."
