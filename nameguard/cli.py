# Nameguard - Filename acceptability checker for file-sync clients
#
# This file is distributed under the MIT License. See the LICENSE file
# in the root of this project for more information.

import logging
import click
from nameguard.capability import State, Capability, make_state
from nameguard.capability import capability_from_environment
from nameguard.result import Reason, get_reason, get_payload
from nameguard.validator import validate_name, validate_folder_and_file_paths
from nameguard.validator import validate_folder_path, split_path, is_file_hidden

FAILURE_MESSAGES = {
    Reason.EMPTY_NAME:               "The name can't be empty.",
    Reason.ALREADY_EXISTS:           "A file or folder with this name already exists.",
    Reason.TRAILING_SPACE_OR_PERIOD: "The name can't end with a space or a period.",
    Reason.INVALID_CHARACTER:        "The character '{0}' isn't allowed in names.",
    Reason.RESERVED_NAME:            "'{0}' is a reserved name.",
    Reason.FORBIDDEN_EXTENSION:      "Files with the '.{0}' extension aren't allowed."
}

UNCONFIGURED_RULES_MESSAGE = """Note: none of the naming rules is \
enabled, only the empty name, existing name and trailing space or \
period rules are checked.

Enable rules with the command-line options or with the following \
variables.

NAMEGUARD_FORBIDDEN_CHARACTERS - Refuse names with reserved characters
NAMEGUARD_FORBIDDEN_NAMES      - Refuse reserved device names (CON, LPT1, ...)
NAMEGUARD_FORBIDDEN_EXTENSIONS - Refuse .part and .filepart files
"""

CHARACTERS_FLAG_DESCRIPTION = "Turn the reserved characters rule on or off."
NAMES_FLAG_DESCRIPTION      = "Turn the reserved device names rule on or off."
EXTENSIONS_FLAG_DESCRIPTION = "Turn the forbidden extensions rule on or off."
EXISTING_FLAG_DESCRIPTION   = "Name already present in the target folder (can be repeated)."
VERBOSE_FLAG_DESCRIPTION    = "Log refused names."

def format_failure(failure):
    message = FAILURE_MESSAGES[get_reason(failure)]
    return message.format(get_payload(failure))

def create_capability(characters, names, extensions):
    # command-line options take precedence over the environment
    capability = capability_from_environment()

    if characters is not None:
        capability = capability._replace(forbidden_characters=make_state(characters))
    if names is not None:
        capability = capability._replace(forbidden_names=make_state(names))
    if extensions is not None:
        capability = capability._replace(forbidden_extensions=make_state(extensions))

    if capability == Capability(State.UNSPECIFIED, State.UNSPECIFIED, State.UNSPECIFIED):
        click.echo(UNCONFIGURED_RULES_MESSAGE, err=True)

    return capability

def rule_options(function):
    function = click.option('--extensions', '-x', metavar='on|off', help=EXTENSIONS_FLAG_DESCRIPTION)(function)
    function = click.option('--names',      '-n', metavar='on|off', help=NAMES_FLAG_DESCRIPTION)(function)
    function = click.option('--characters', '-c', metavar='on|off', help=CHARACTERS_FLAG_DESCRIPTION)(function)
    return function

@click.group()
@click.option('--verbose', '-v', is_flag=True, help=VERBOSE_FLAG_DESCRIPTION)
def cli(verbose):
    if verbose:
        logging.basicConfig(level=logging.DEBUG)

@cli.command('name')
@click.argument('name')
@click.option('--existing', '-e', multiple=True, help=EXISTING_FLAG_DESCRIPTION)
@rule_options
def check_name(name, existing, characters, names, extensions):
    """ Check a file or folder name.

    This command checks whether a name would be accepted by the backend
    before a file or folder is created or renamed with it.

    It takes the name in parameter, and optionally the names already
    present in the target folder with the **--existing** flag (which can
    be repeated); the name is then also refused if it's conflicting
    with one of them.

    Which naming rules are checked is configured with the
    **--characters**, **--names** and **--extensions** options (each taking
    **on** or **off**), or with the NAMEGUARD_FORBIDDEN_* variables.
    """

    capability = create_capability(characters, names, extensions)
    existing_names = set(existing) if existing else None

    failure = validate_name(name, capability, existing_names)
    if failure is not None:
        print("Name '{0}' is refused. {1}".format(name, format_failure(failure)))
        exit(1)

    print("Name '{0}' is valid.".format(name))

@cli.command('folder')
@click.argument('path')
@rule_options
def check_folder(path, characters, names, extensions):
    """ Check a folder path.

    This command checks every segment of a folder path. Both forward and
    back slashes are accepted as separators and empty segments are
    ignored.

    Refer to the name command for the naming rules options.
    """

    capability = create_capability(characters, names, extensions)

    if not validate_folder_path(path, capability):
        print("Folder path '{0}' is refused.".format(path))
        display_first_failure(split_path(path), capability)
        exit(1)

    print("Folder path '{0}' is valid.".format(path))

@cli.command('paths')
@click.argument('folder')
@click.argument('files', nargs=-1)
@rule_options
def check_paths(folder, files, characters, names, extensions):
    """ Check files moved or copied into a folder.

    This command checks the target folder path and the names of the
    files to be moved or copied inside it. Note that file names aren't
    split into segments.

    Refer to the name command for the naming rules options.
    """

    capability = create_capability(characters, names, extensions)

    if not validate_folder_and_file_paths(folder, files, capability):
        print("Unable to move or copy files into '{0}'.".format(folder))
        display_first_failure(split_path(folder) + list(files), capability)
        exit(1)

    print("Files can be moved or copied into '{0}'.".format(folder))

@cli.command('hidden')
@click.argument('name')
def check_hidden(name):
    """ Tell whether a name is a hidden file name.

    Exits with 0 if the name is hidden, 1 otherwise.
    """

    if not is_file_hidden(name):
        print("Name '{0}' isn't hidden.".format(name))
        exit(1)

    print("Name '{0}' is hidden.".format(name))

def display_first_failure(names, capability):
    # the path validators only return a boolean, validate the names
    # again to tell which one is refused
    for name in names:
        failure = validate_name(name, capability)
        if failure is not None:
            print("Name '{0}' is refused. {1}".format(name, format_failure(failure)))
            return
