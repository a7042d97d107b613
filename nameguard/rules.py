# Nameguard - Filename acceptability checker for file-sync clients
#
# This file is distributed under the MIT License. See the LICENSE file
# in the root of this project for more information.

""" Naming rule tables and the predicates testing a name against them.

The tables are immutable and shared by the whole process. Each
predicate looks at one name and one rule only; combining them in the
right order is the job of the validator.
"""

RESERVED_WINDOWS_CHARACTERS = frozenset(['<', '>', ':', '"', '/', '\\', '|', '?', '*'])
RESERVED_UNIX_CHARACTERS    = frozenset(['/', '<', '>', '|', ':', '&'])

RESERVED_CHARACTERS = RESERVED_WINDOWS_CHARACTERS | RESERVED_UNIX_CHARACTERS

RESERVED_WINDOWS_NAMES = frozenset(
    ['CON', 'PRN', 'AUX', 'NUL']
    + ['COM{0}'.format(i) for i in range(10)] + ['COM¹', 'COM²', 'COM³']
    + ['LPT{0}'.format(i) for i in range(10)] + ['LPT¹', 'LPT²', 'LPT³']
)

FORBIDDEN_EXTENSIONS = ('.filepart', '.part')

SPACE  = ' '
PERIOD = '.'

def is_blank(name):
    return not name.strip()

def has_trailing_space_or_period(name):
    return name.endswith(SPACE) or name.endswith(PERIOD)

def find_invalid_character(name):
    """ Find the first reserved character of a name.

    The name is scanned from left to right and the first character
    belonging to either the Windows or the Unix reserved set is
    returned. Both sets apply no matter which operating system runs the
    backend.

    :param name: The name to scan.
    :return: The offending character, or None.
    """

    for character in name:
        if character in RESERVED_CHARACTERS:
            return character

    return None

def remove_file_extension(name):
    """ Return everything before the last period (or the whole name). """

    stem, period, _ = name.rpartition(PERIOD)
    if not period:
        return name

    return stem

def find_reserved_name(name):
    """ Find whether a name is a reserved device name.

    Both the full name and the name without its extension are
    uppercased and looked up in the reserved names table, therefore
    'con', 'Con' and 'CON.txt' are all reserved while 'constitution.txt'
    isn't.

    :param name: The name to test.
    :return: The matching stem as written in the name, or None.
    """

    if name.upper() in RESERVED_WINDOWS_NAMES:
        return name

    stem = remove_file_extension(name)
    if stem.upper() in RESERVED_WINDOWS_NAMES:
        return stem

    return None

def find_forbidden_extension(name):
    """ Find whether a name ends with a forbidden extension.

    The suffix comparison ignores case. Note that the returned value is
    the text following the *first* period of the name, not the matched
    suffix, so 'backup.tar.part' gives 'tar.part'.

    :param name: The name to test.
    :return: The extension text, or None.
    """

    lowered = name.lower()
    if not any(lowered.endswith(extension) for extension in FORBIDDEN_EXTENSIONS):
        return None

    _, _, extension = name.partition(PERIOD)
    return extension
