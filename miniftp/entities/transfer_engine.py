import socket

CHUNK_SIZE = 65536
CRLF = b"\r\n"


class TransferError(Exception):
    """Fallo de una transferencia con la conexión de datos ya abierta."""
    pass


class LocalIOError(TransferError):
    """Fallo leyendo, enumerando o escribiendo el archivo local."""
    pass


class DataConnectionError(TransferError):
    """Fallo leyendo o escribiendo la conexión de datos."""
    pass


def _send(data_conn: socket.socket, data: bytes) -> None:
    try:
        data_conn.sendall(data)
    except OSError as e:
        raise DataConnectionError(f"Data connection write failed: {e}") from e


def list_path(file_system, target: str, data_conn: socket.socket, line_ending: bytes) -> int:
    """
    Envía por la conexión de datos el nombre de `target` si es un archivo,
    o el nombre de cada entrada si es un directorio (una por línea, sin
    ordenar). Retorna la cantidad de líneas enviadas.
    """
    try:
        if file_system.is_dir(target):
            names = file_system.list_names(target)
        else:
            names = [target]
    except OSError as e:
        raise LocalIOError(f"Cannot enumerate {target!r}: {e}") from e

    for name in names:
        _send(data_conn, name.encode('utf-8', errors='surrogateescape') + line_ending)

    return len(names)


def retrieve_file(source, data_conn: socket.socket, binary: bool) -> int:
    """
    Copia `source` (archivo binario abierto) a la conexión de datos.

    En modo binario los bytes se copian tal cual. En modo ASCII cada línea
    (terminada en LF, con o sin CR previo) se reescribe terminada en CRLF,
    incluida una última línea sin terminador. Retorna los bytes enviados.
    """
    total_sent = 0

    if binary:
        while True:
            try:
                chunk = source.read(CHUNK_SIZE)
            except OSError as e:
                raise LocalIOError(f"Read failed: {e}") from e
            if not chunk:
                break
            _send(data_conn, chunk)
            total_sent += len(chunk)
        return total_sent

    try:
        for line in source:
            if line.endswith(b"\n"):
                line = line[:-1]
                # Solo un CR inmediatamente antes del LF
                if line.endswith(b"\r"):
                    line = line[:-1]
            out = line + CRLF
            _send(data_conn, out)
            total_sent += len(out)
    except OSError as e:
        raise LocalIOError(f"Read failed: {e}") from e

    return total_sent


def store_file(destination, data_conn: socket.socket) -> int:
    """
    Copia el flujo de la conexión de datos a `destination` hasta EOF, sin
    traducir finales de línea. Retorna los bytes recibidos.
    """
    total_received = 0

    while True:
        try:
            chunk = data_conn.recv(CHUNK_SIZE)
        except OSError as e:
            raise DataConnectionError(f"Data connection read failed: {e}") from e
        if not chunk:
            break
        try:
            destination.write(chunk)
        except OSError as e:
            raise LocalIOError(f"Write failed: {e}") from e
        total_received += len(chunk)

    return total_received


__all__ = [
    'TransferError',
    'LocalIOError',
    'DataConnectionError',
    'list_path',
    'retrieve_file',
    'store_file',
]
