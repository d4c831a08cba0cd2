from miniftp.entities.data_channel import DataChannelError
from miniftp.entities.file_system_manager import SecurityError
from miniftp.entities.transfer_engine import TransferError, retrieve_file


def handle_retr(command, session):
    """Maneja comando RETR - envía un archivo por la conexión de datos.

    En modo ASCII los finales de línea se normalizan a CRLF; en binario se
    envía byte a byte.
    """
    if not command.require_args(1):
        return 501, "Usage: RETR filename"

    filename = command.get_arg(0)

    try:
        source = session.file_system.open_read(filename)
    except (OSError, SecurityError) as e:
        session.log_failure(command, e)
        return 550, "File not found."

    with source:
        session.send_response(150, "File ok. Sending.")

        try:
            data_conn = session.open_data_connection()
        except DataChannelError as e:
            session.log_failure(command, e)
            return 425, "Can't open data connection."

        try:
            total_sent = retrieve_file(source, data_conn, session.binary)
        except TransferError as e:
            session.log_failure(command, e)
            return 450, "File unavailable."
        finally:
            data_conn.close()

    session.logger.info("RETR %s: %d bytes sent to %s", filename, total_sent, session.client_address)
    return 226, "Transfer complete."
