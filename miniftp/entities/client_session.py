import logging
import socket

from miniftp.entities.command import Command
from miniftp.entities.data_channel import DataChannelProvisioner
from miniftp.entities.response_writer import ControlConnectionError, ResponseWriter

logger = logging.getLogger(__name__)

# Líneas de control más largas que esto cierran la sesión
MAX_LINE_LENGTH = 64 * 1024

# Comandos que dejan un descriptor de datos pendiente para el siguiente
DATA_SETUP_COMMANDS = ("PORT", "PASV")


class ClientSession:
    """Estado y bucle de comandos de una conexión de control FTP.

    Una sesión atiende un comando a la vez: no lee la siguiente línea hasta
    que el comando actual (incluida su transferencia) terminó y respondió.
    """

    def __init__(self, control_socket: socket.socket, client_address, file_system, handlers=None, log: logging.Logger = None):
        if handlers is None:
            from miniftp.handlers_dispatch import FTP_COMMAND_HANDLERS
            handlers = FTP_COMMAND_HANDLERS

        self.control_socket = control_socket
        self.client_address = client_address
        self.file_system = file_system
        self.handlers = handlers
        self.logger = log or logger

        # ASCII por defecto; persiste hasta el próximo TYPE
        self.binary = False
        self.previous_command = None
        self.closed = False

        self.writer = ResponseWriter(control_socket, client_address, self.logger)
        self.data_channel = DataChannelProvisioner(client_address, self.logger)

    # ----------------- responses -----------------
    def send_response(self, code: int, message: str) -> None:
        """Envía una respuesta; propaga ControlConnectionError si falla."""
        self.writer.send_response(code, message)

    def line_ending(self) -> bytes:
        return b"\n" if self.binary else b"\r\n"

    # ----------------- data connection -----------------
    def local_host(self) -> str:
        """IP local de la conexión de control (interfaz para PASV)."""
        return self.control_socket.getsockname()[0]

    def open_data_connection(self) -> socket.socket:
        return self.data_channel.realize()

    def log_failure(self, command: Command, error) -> None:
        self.logger.warning("Command %s from %s failed: %s", command.name, self.client_address, error)

    # ----------------- lifecycle -----------------
    def request_quit(self) -> None:
        self.closed = True

    def run(self) -> None:
        """Saludo, bucle de comandos y cierre de la conexión de control."""
        try:
            self.send_response(220, "Ready.")
            for line in self._read_lines():
                command = Command(line)
                if command.is_empty():
                    continue

                self.dispatch(command)
                if self.closed:
                    break

        except ControlConnectionError as e:
            self.logger.warning("Control connection to %s lost: %s", self.client_address, e)

        finally:
            self.close()

    def dispatch(self, command: Command) -> None:
        """Ejecuta un comando y envía su respuesta final."""
        self.logger.info("Received command from %s: %s", self.client_address, command)
        handler = self.handlers.get(command.name)

        try:
            if handler is None:
                code, message = 502, f'Command "{command.name}" not implemented.'
            else:
                code, message = handler(command, self)
            self.send_response(code, message)

        finally:
            # Un PASV/PORT no consumido por el comando inmediato se descarta
            if command.name not in DATA_SETUP_COMMANDS:
                self.data_channel.release()
            self.previous_command = command.name

    def close(self) -> None:
        """Libera el listener PASV y cierra la conexión de control (una vez)."""
        if self.control_socket is None:
            return

        self.closed = True
        self.data_channel.release()
        try:
            self.control_socket.close()
        except OSError:
            self.logger.exception("Error closing control connection for %s", self.client_address)
        self.control_socket = None
        self.logger.info("Session closed for %s", self.client_address)

    def _read_lines(self):
        """Genera líneas de la conexión de control hasta EOF o error de lectura."""
        buf = b""
        for chunk in recv_chunks(self.control_socket, self.client_address, self.logger):
            buf += chunk

            while b"\n" in buf:
                line, buf = buf.split(b"\n", 1)
                if line.endswith(b"\r"):
                    line = line[:-1]
                yield line.decode('utf-8', errors='replace')

            if len(buf) > MAX_LINE_LENGTH:
                self.logger.warning("Command line from %s too long, closing", self.client_address)
                return

        self.logger.info("Client %s closed the connection", self.client_address)

    def __str__(self):
        return f"ClientSession(addr={self.client_address}, binary={self.binary}, pending={self.data_channel.pending})"


def recv_chunks(sock: socket.socket, client_address=None, log: logging.Logger = logger, chunk_size: int = 4096):
    """Generador que devuelve chunks de bytes desde `sock` hasta EOF."""
    try:
        while True:
            chunk = sock.recv(chunk_size)

            if not chunk:
                break

            yield chunk

    except OSError as e:
        log.info("Reading commands from %s interrupted: %s", client_address, e)
        return
