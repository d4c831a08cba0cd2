"""Servidor FTP mínimo: conexión de control, PORT/PASV y LIST/RETR/STOR."""

__version__ = "0.1.0"
