import ipaddress
import socket


class AddressError(ValueError):
    """Dirección FTP (h1,h2,h3,h4,p1,p2) inválida o no representable."""
    pass


def encode_address(host: str, port: int) -> str:
    """Convierte (host, puerto) al formato de 6 campos que usan PORT/PASV.

    El host se resuelve como IPv4; IPv6 no está soportado.
    """
    try:
        ip = ipaddress.IPv4Address(socket.gethostbyname(host))
    except (OSError, ValueError) as e:
        raise AddressError(f"Cannot resolve {host!r} as IPv4: {e}") from e

    if not 0 <= port <= 0xFFFF:
        raise AddressError(f"Port out of range: {port}")

    octets = [str(b) for b in ip.packed]
    return ",".join(octets + [str(port // 256), str(port % 256)])


def decode_address(text: str) -> tuple[str, int]:
    """Parsea 'a,b,c,d,p1,p2' y retorna (host, puerto)."""
    fields = text.split(",")
    if len(fields) != 6:
        raise AddressError(f"Expected 6 fields, got {len(fields)}: {text!r}")

    values = []
    for field in fields:
        if not (field.isascii() and field.isdigit()):
            raise AddressError(f"Non-numeric field {field!r} in {text!r}")
        value = int(field)
        if value > 255:
            raise AddressError(f"Field out of range {field!r} in {text!r}")
        values.append(value)

    host = ".".join(str(v) for v in values[:4])
    port = 256 * values[4] + values[5]
    return host, port


__all__ = ['AddressError', 'encode_address', 'decode_address']
