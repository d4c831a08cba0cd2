"""Fixtures compartidos: sesiones reales sobre sockets TCP de loopback."""

import socket
import threading

import pytest

from miniftp.entities.address_codec import decode_address
from miniftp.entities.client_session import ClientSession
from miniftp.entities.file_system_manager import LocalFileSystem

TIMEOUT = 5.0


class ControlClient:
    """Cliente mínimo de la conexión de control para los tests."""

    def __init__(self, sock: socket.socket):
        self.sock = sock
        self.reader = sock.makefile('rb')

    def reply(self) -> str:
        return self.reader.readline().decode('utf-8').rstrip("\r\n")

    def send(self, line: str) -> None:
        self.sock.sendall(line.encode('utf-8') + b"\r\n")

    def command(self, line: str) -> str:
        self.send(line)
        return self.reply()

    def pasv(self) -> socket.socket:
        """PASV + conexión al listener anunciado. Retorna el socket de datos."""
        reply = self.command("PASV")
        assert reply.startswith("227 =")
        host, port = decode_address(reply[len("227 ="):])
        return socket.create_connection((host, port), timeout=TIMEOUT)

    def close(self) -> None:
        self.reader.close()
        self.sock.close()


def recv_all(sock: socket.socket) -> bytes:
    chunks = []
    while True:
        chunk = sock.recv(4096)
        if not chunk:
            break
        chunks.append(chunk)
    return b"".join(chunks)


@pytest.fixture
def file_system(tmp_path):
    return LocalFileSystem(str(tmp_path))


@pytest.fixture
def ftp(file_system):
    """Sesión corriendo en un hilo + cliente conectado, ya saludado."""
    acceptor = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    acceptor.bind(("127.0.0.1", 0))
    acceptor.listen(1)

    client_sock = socket.create_connection(acceptor.getsockname(), timeout=TIMEOUT)
    server_sock, client_addr = acceptor.accept()
    acceptor.close()

    session = ClientSession(server_sock, client_addr, file_system)
    thread = threading.Thread(target=session.run, daemon=True)
    thread.start()

    client = ControlClient(client_sock)
    assert client.reply() == "220 Ready."
    client.session = session
    client.thread = thread

    yield client

    client.close()
    thread.join(TIMEOUT)
