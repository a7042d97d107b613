from nameguard.capability import State, Capability
from nameguard.capability import make_state, make_capability
from nameguard.capability import capability_from_server, capability_from_environment

from nameguard.result import Reason, get_reason, get_payload

from nameguard.validator import validate_name, ensure_name_valid
from nameguard.validator import validate_folder_path, validate_file_paths
from nameguard.validator import validate_folder_and_file_paths
from nameguard.validator import is_file_hidden, is_file_name_already_exist, split_path

from nameguard.exceptions import *
