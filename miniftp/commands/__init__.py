from .user import handle_user
from .quit import handle_quit
from .noop import handle_noop
from .syst import handle_syst
from .type import handle_type
from .stru import handle_stru
from .mode import handle_mode
from .port import handle_port
from .pasv import handle_pasv
from .list import handle_list
from .retr import handle_retr
from .stor import handle_stor

__all__ = ["handle_user", "handle_quit", "handle_noop", "handle_syst", "handle_type",
           "handle_stru", "handle_mode", "handle_port", "handle_pasv", "handle_list",
           "handle_retr", "handle_stor"]
