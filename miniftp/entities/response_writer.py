import logging
import socket

logger = logging.getLogger(__name__)


class ControlConnectionError(OSError):
    """La conexión de control ya no acepta escrituras."""
    pass


class ResponseWriter:
    """Envía respuestas numéricas por la conexión de control."""

    def __init__(self, control_socket: socket.socket, client_address=None, log: logging.Logger = None):
        self.control_socket = control_socket
        self.client_address = client_address
        self.logger = log or logger
        # Primer error de escritura; una vez fijado la conexión se da por muerta
        self.error = None

    def send_response(self, code: int, message: str) -> None:
        """Envía `code message\\r\\n`. Lanza ControlConnectionError si falla."""
        if self.error is not None:
            raise ControlConnectionError(f"Control connection already failed: {self.error}")

        line = f"{code} {message}\r\n"
        try:
            self.control_socket.sendall(line.encode('utf-8'))
        except OSError as e:
            self.error = e
            raise ControlConnectionError(f"Failed to send reply {code}: {e}") from e

        self.logger.info("Sent response to %s: %s", self.client_address, line.strip())
