from miniftp.commands import *

# Diccionario de handlers: verbo -> handle_x(command, session) -> (code, message)
FTP_COMMAND_HANDLERS = {
    "USER": handle_user,
    "QUIT": handle_quit,
    "NOOP": handle_noop,
    "SYST": handle_syst,
    "TYPE": handle_type,
    "STRU": handle_stru,
    "MODE": handle_mode,
    "PORT": handle_port,
    "PASV": handle_pasv,
    "LIST": handle_list,
    "RETR": handle_retr,
    "STOR": handle_stor,
}
