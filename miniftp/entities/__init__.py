from .address_codec import AddressError, encode_address, decode_address
from .response_writer import ControlConnectionError, ResponseWriter
from .data_channel import DataChannelError, DataChannelProvisioner, NO_TARGET, ActiveTarget, PassiveListener
from .file_system_manager import SecurityError, LocalFileSystem
from .transfer_engine import TransferError, LocalIOError, DataConnectionError, list_path, retrieve_file, store_file
from .command import Command
from .client_session import ClientSession

__all__ = [
    "AddressError", "encode_address", "decode_address",
    "ControlConnectionError", "ResponseWriter",
    "DataChannelError", "DataChannelProvisioner", "NO_TARGET", "ActiveTarget", "PassiveListener",
    "SecurityError", "LocalFileSystem",
    "TransferError", "LocalIOError", "DataConnectionError", "list_path", "retrieve_file", "store_file",
    "Command",
    "ClientSession",
]
