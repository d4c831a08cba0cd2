import logging
import socket
import threading
from typing import Callable

from miniftp.entities.client_session import ClientSession
from miniftp.entities.file_system_manager import LocalFileSystem

logger = logging.getLogger(__name__)


def start_connection_listener(host: str = '0.0.0.0', port: int = 8000, root_directory: str = '.', backlog: int = 5, on_client: Callable = None):
    """Punto de entrada para aceptar conexiones y lanzar una sesión por cliente.

    Cada conexión de control se atiende en un hilo separado; las sesiones no
    comparten estado salvo el logging.
    """

    if on_client is None:
        on_client = client_handler

    file_system = LocalFileSystem(root_directory)

    server_sock = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    server_sock.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
    server_sock.bind((host, port))
    server_sock.listen(backlog)
    logger.info("FTP connection listener started on %s:%d serving %s", host, port, file_system.root_directory)

    try:
        while True:
            try:
                client_sock, client_addr = server_sock.accept()

            except OSError as e:
                logger.exception("Error accepting connection: %s", e)
                continue

            logger.info("Accepted connection from %s", client_addr)
            t = threading.Thread(target=on_client, args=(client_sock, client_addr, file_system), daemon=True)
            t.start()

    finally:
        server_sock.close()
        logger.info("Connection listener stopped")


def client_handler(client_socket: socket.socket, client_address, file_system: LocalFileSystem):
    """Crear sesión y ejecutarla hasta que se cierre la conexión de control."""
    logger.info("Handling new client %s", client_address)
    session = ClientSession(client_socket, client_address, file_system)

    try:
        session.run()

    except Exception:
        logger.exception("Error while handling client %s", client_address)

    finally:
        session.close()


__all__ = [
    'start_connection_listener',
    'client_handler',
]
