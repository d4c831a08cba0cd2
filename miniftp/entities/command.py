class Command:
    """Una línea de la conexión de control: verbo + argumentos."""

    def __init__(self, line: str):
        # Sin comillas ni escapes: los tokens se pasan tal cual
        tokens = line.split()
        self.name = tokens[0].upper() if tokens else ""
        self.args = tokens[1:]

    def __str__(self):
        return f"Command(name='{self.name}', args={self.args})"

    def is_empty(self) -> bool:
        return not self.name

    def arg_count(self) -> int:
        return len(self.args)

    def require_args(self, count: int) -> bool:
        """True si el comando trae exactamente `count` argumentos"""
        return len(self.args) == count

    def get_arg(self, index: int, default=None):
        if index < len(self.args):
            return self.args[index]
        return default

    def joined_args(self) -> str:
        """Argumentos unidos por un espacio y en mayúsculas (TYPE 'L 8')"""
        return " ".join(self.args).upper()
