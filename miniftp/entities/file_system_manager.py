import os
import posixpath


class SecurityError(Exception):
    """Excepción para errores de seguridad"""
    pass


class LocalFileSystem:
    """Acceso al filesystem local confinado a un directorio raíz.

    Las rutas del cliente son virtuales: '/' es la raíz configurada y las
    rutas relativas se resuelven también desde la raíz.
    """

    def __init__(self, root_directory: str):
        self.root_directory = os.path.abspath(root_directory)

    # =========================================================================
    # PATH RESOLUTION
    # =========================================================================

    def resolve(self, requested_path: str) -> str:
        """
        Convierte una ruta del cliente en una ruta real dentro de la raíz.

        Raises:
            SecurityError: Si la ruta queda fuera del directorio raíz o contiene un byte nulo
        """
        if "\x00" in requested_path:
            raise SecurityError("Null byte in path")

        virtual_path = posixpath.normpath(posixpath.join('/', requested_path))
        real_path = os.path.normpath(os.path.join(self.root_directory, virtual_path.lstrip('/')))

        if real_path != self.root_directory and not real_path.startswith(self.root_directory + os.sep):
            raise SecurityError("Path traversal attempt detected")

        return real_path

    # =========================================================================
    # QUERIES
    # =========================================================================

    def exists(self, path: str) -> bool:
        """Verifica si la ruta existe dentro de la raíz"""
        try:
            return os.path.exists(self.resolve(path))
        except SecurityError:
            return False

    def is_dir(self, path: str) -> bool:
        return os.path.isdir(self.resolve(path))

    def list_names(self, path: str) -> list[str]:
        """Nombres de las entradas del directorio, en el orden del sistema"""
        return os.listdir(self.resolve(path))

    # =========================================================================
    # FILE OPERATIONS
    # =========================================================================

    def open_read(self, path: str):
        """Abre un archivo en modo binario para lectura"""
        return open(self.resolve(path), 'rb')

    def create(self, path: str):
        """Crea (o trunca) un archivo en modo binario para escritura"""
        return open(self.resolve(path), 'wb')


__all__ = ['SecurityError', 'LocalFileSystem']
