# Nameguard - Filename acceptability checker for file-sync clients
#
# This file is distributed under the MIT License. See the LICENSE file
# in the root of this project for more information.

from enum import IntEnum

Reason = IntEnum('Reason', [
    'EMPTY_NAME',
    'ALREADY_EXISTS',
    'TRAILING_SPACE_OR_PERIOD',
    'INVALID_CHARACTER',
    'RESERVED_NAME',
    'FORBIDDEN_EXTENSION'
])

def make_empty_name_failure():
    return (Reason.EMPTY_NAME,)

def make_already_exists_failure():
    return (Reason.ALREADY_EXISTS,)

def make_trailing_space_or_period_failure():
    return (Reason.TRAILING_SPACE_OR_PERIOD,)

def make_invalid_character_failure(character):
    return (Reason.INVALID_CHARACTER, character)

def make_reserved_name_failure(stem):
    return (Reason.RESERVED_NAME, stem)

def make_forbidden_extension_failure(extension):
    return (Reason.FORBIDDEN_EXTENSION, extension)

def get_reason(failure):
    return failure[0]

def get_payload(failure):
    """ Return the data carried by a failure, or None if it has none. """

    if len(failure) > 1:
        return failure[1]

    return None
