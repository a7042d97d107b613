# Nameguard - Filename acceptability checker for file-sync clients
#
# This file is distributed under the MIT License. See the LICENSE file
# in the root of this project for more information.

import logging
import re
from nameguard.capability import Capability, is_enabled
from nameguard.rules import is_blank, has_trailing_space_or_period
from nameguard.rules import find_invalid_character, find_reserved_name, find_forbidden_extension
from nameguard.result import *
from nameguard.exceptions import FileNameError

logger = logging.getLogger(__name__)

PATH_SEPARATORS = re.compile(r'[/\\]')

def is_file_hidden(name):
    return bool(name) and name[0] == '.'

def is_file_name_already_exist(name, existing_names):
    return name in existing_names

def validate_name(name, capability, existing_names=None):
    """ Validate a file (or folder) name.

    This function checks a single name against the naming rules and
    returns None if it's acceptable, or a failure tuple otherwise. The
    first item of the failure tuple is a :py:class:`Reason` and the
    second item, if any, is the data needed to format a message (the
    offending character, the reserved stem or the forbidden extension).

    Rules are checked in the following order and the first one that
    fails is reported, so a name breaking several rules always gives
    the same failure.

      1. The name isn't empty or blank.
      2. The name isn't in the existing names (only if given).
      3. The name doesn't end with a space or a period.
      4. The name has no reserved character.
      5. The name isn't a reserved device name.
      6. The name doesn't end with a forbidden extension.

    Rules 4, 5 and 6 are only checked if the capability enables them.

    This function never raises and has no side effect.

    :param name: The name to validate.
    :param capability: The capability descriptor of the backend.
    :type capability: Capability
    :param existing_names: Names already present in the target folder.
    :return: None if the name is valid, a failure tuple otherwise.
    """

    failure = _check_name(name, capability, existing_names)

    if failure is not None:
        logger.debug("name %r refused: %s", name, get_reason(failure).name)

    return failure

def _check_name(name, capability, existing_names):
    if capability is None:
        capability = Capability()

    if is_blank(name):
        return make_empty_name_failure()

    if existing_names is not None and is_file_name_already_exist(name, existing_names):
        return make_already_exists_failure()

    if has_trailing_space_or_period(name):
        return make_trailing_space_or_period_failure()

    if is_enabled(capability.forbidden_characters):
        character = find_invalid_character(name)
        if character is not None:
            return make_invalid_character_failure(character)

    if is_enabled(capability.forbidden_names):
        stem = find_reserved_name(name)
        if stem is not None:
            return make_reserved_name_failure(stem)

    if is_enabled(capability.forbidden_extensions):
        extension = find_forbidden_extension(name)
        if extension is not None:
            return make_forbidden_extension_failure(extension)

    return None

def ensure_name_valid(name, capability, existing_names=None):
    """ Validate a name and raise if it's refused.

    Same as :py:func:`validate_name` except that a refused name raises
    :py:exc:`FileNameError` instead of returning a failure tuple.

    :raises FileNameError: If the name is refused.
    """

    failure = validate_name(name, capability, existing_names)
    if failure is not None:
        raise FileNameError(name, failure)

def split_path(path):
    """ Split a path into its non-empty segments.

    Both forward and back slashes are separators, and the empty
    segments created by leading, trailing or doubled separators are
    dropped, so '/a//b\\c/' gives ['a', 'b', 'c'].
    """

    return [segment for segment in PATH_SEPARATORS.split(path) if segment]

def validate_folder_path(path, capability):
    """ Validate every segment of a folder path.

    Each segment is validated as a name, without existing names. Only a
    boolean is returned; run :py:func:`validate_name` on the segments
    to know which one is refused and why.

    :param path: The folder path.
    :param capability: The capability descriptor of the backend.
    :return: True if all segments are valid, False otherwise.
    """

    return all(validate_name(segment, capability) is None for segment in split_path(path))

def validate_file_paths(paths, capability):
    """ Validate a sequence of file names.

    Note that each item is validated as a single name; it isn't split
    into segments.
    """

    return all(validate_name(path, capability) is None for path in paths)

def validate_folder_and_file_paths(folder_path, file_paths, capability):
    """ Validate files moved or copied into a folder.

    :param folder_path: The target folder path.
    :param file_paths: The names of the files moved or copied.
    :param capability: The capability descriptor of the backend.
    :return: True if the folder path and all file names are valid.
    """

    return validate_folder_path(folder_path, capability) and validate_file_paths(file_paths, capability)
