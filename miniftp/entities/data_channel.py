import logging
import socket
from dataclasses import dataclass

from miniftp.entities.address_codec import AddressError, decode_address, encode_address

logger = logging.getLogger(__name__)


class DataChannelError(OSError):
    """No se pudo preparar o abrir la conexión de datos."""
    pass


class NoTarget:
    """Ningún PORT/PASV pendiente."""

    def __repr__(self):
        return "NO_TARGET"


NO_TARGET = NoTarget()


@dataclass(frozen=True)
class ActiveTarget:
    """Dirección anunciada por PORT; se conecta al momento de transferir."""
    host: str
    port: int


@dataclass(frozen=True)
class PassiveListener:
    """Socket abierto por PASV esperando una única conexión del cliente."""
    sock: socket.socket
    port: int


class DataChannelProvisioner:
    """Mantiene el estado PORT/PASV pendiente de una sesión y abre la
    conexión de datos cuando un comando de transferencia la necesita.

    El descriptor pendiente es siempre uno de NO_TARGET, ActiveTarget o
    PassiveListener, y cada descriptor se usa una sola vez.
    """

    def __init__(self, client_address=None, log: logging.Logger = None):
        self.client_address = client_address
        self.logger = log or logger
        self.pending = NO_TARGET

    # ----------------- PORT -----------------
    def record_active_target(self, text: str) -> ActiveTarget:
        """Registra la dirección de PORT sin conectar todavía."""
        self.release()
        host, port = decode_address(text)
        self.pending = ActiveTarget(host, port)
        self.logger.info("PORT target for %s set to %s:%d", self.client_address, host, port)
        return self.pending

    # ----------------- PASV -----------------
    def open_passive_listener(self, local_host: str) -> str:
        """Abre un listener en un puerto efímero de `local_host` y retorna la
        dirección codificada para la respuesta 227.

        Si cualquier paso falla se cierra el listener y no queda nada pendiente.
        """
        self.release()
        listener = None
        try:
            listener = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
            listener.bind((local_host, 0))
            listener.listen(1)
            port = listener.getsockname()[1]
            encoded = encode_address(local_host, port)
        except (OSError, AddressError) as e:
            if listener is not None:
                listener.close()
            raise DataChannelError(f"Cannot open passive listener on {local_host}: {e}") from e

        self.pending = PassiveListener(listener, port)
        self.logger.info("PASV listening on %s:%d for %s", local_host, port, self.client_address)
        return encoded

    # ----------------- data connection -----------------
    def realize(self) -> socket.socket:
        """Abre la conexión de datos según el descriptor pendiente.

        PORT conecta hacia el cliente; PASV acepta una conexión entrante.
        El descriptor queda limpio en todos los casos.
        """
        pending = self.pending
        self.pending = NO_TARGET

        if isinstance(pending, ActiveTarget):
            try:
                conn = socket.create_connection((pending.host, pending.port))
            except OSError as e:
                raise DataChannelError(f"Cannot connect to {pending.host}:{pending.port}: {e}") from e
            self.logger.info("Data connection to %s:%d opened for %s", pending.host, pending.port, self.client_address)
            return conn

        if isinstance(pending, PassiveListener):
            try:
                conn, data_addr = pending.sock.accept()
            except OSError as e:
                raise DataChannelError(f"Cannot accept on port {pending.port}: {e}") from e
            finally:
                pending.sock.close()
            self.logger.info("Data connection established with %s for %s", data_addr, self.client_address)
            return conn

        raise DataChannelError("No prior PORT/PASV")

    def release(self) -> None:
        """Cierra un listener PASV sin usar y limpia el descriptor."""
        pending = self.pending
        self.pending = NO_TARGET

        if isinstance(pending, PassiveListener):
            try:
                pending.sock.close()
                self.logger.info("Unused PASV listener on port %d closed for %s", pending.port, self.client_address)
            except OSError as e:
                self.logger.warning("Error closing PASV listener for %s: %s", self.client_address, e)


__all__ = [
    'DataChannelError',
    'DataChannelProvisioner',
    'NO_TARGET',
    'ActiveTarget',
    'PassiveListener',
]
