from miniftp.entities.data_channel import DataChannelError
from miniftp.entities.file_system_manager import SecurityError
from miniftp.entities.transfer_engine import TransferError, store_file


def handle_stor(command, session):
    """Maneja comando STOR - almacena lo recibido por la conexión de datos.

    No se traducen finales de línea, ni siquiera en modo ASCII.
    """
    if not command.require_args(1):
        return 501, "Usage: STOR filename"

    filename = command.get_arg(0)

    try:
        destination = session.file_system.create(filename)
    except (OSError, SecurityError) as e:
        session.log_failure(command, e)
        return 550, "File can't be created."

    with destination:
        session.send_response(150, "Ok to send data.")

        try:
            data_conn = session.open_data_connection()
        except DataChannelError as e:
            session.log_failure(command, e)
            return 425, "Can't open data connection."

        try:
            total_received = store_file(destination, data_conn)
        except TransferError as e:
            session.log_failure(command, e)
            return 450, "File unavailable."
        finally:
            data_conn.close()

    session.logger.info("STOR %s: %d bytes received from %s", filename, total_received, session.client_address)
    return 226, "Transfer complete."
