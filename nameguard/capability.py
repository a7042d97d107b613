# Nameguard - Filename acceptability checker for file-sync clients
#
# This file is distributed under the MIT License. See the LICENSE file
# in the root of this project for more information.

""" Capability descriptor telling which naming rules a backend enforces.

Servers don't always advertise their naming rules, so each rule family
is described by a three-valued state rather than a boolean. Only an
explicitly enabled family is checked; an unspecified one is treated
like a disabled one.
"""

import os
from collections import namedtuple
from enum import Enum

State = Enum('State', [
    'ENABLED',
    'DISABLED',
    'UNSPECIFIED'
])

Capability = namedtuple('Capability', [
    'forbidden_characters',
    'forbidden_names',
    'forbidden_extensions'
], defaults=[State.UNSPECIFIED, State.UNSPECIFIED, State.UNSPECIFIED])

ENABLED_VALUES  = ('true', 'yes', 'on', 'enabled', '1')
DISABLED_VALUES = ('false', 'no', 'off', 'disabled', '0')

FORBIDDEN_CHARACTERS_VARIABLE = 'NAMEGUARD_FORBIDDEN_CHARACTERS'
FORBIDDEN_NAMES_VARIABLE      = 'NAMEGUARD_FORBIDDEN_NAMES'
FORBIDDEN_EXTENSIONS_VARIABLE = 'NAMEGUARD_FORBIDDEN_EXTENSIONS'

def is_enabled(state):
    # plain booleans and raw values are accepted as well as states
    return make_state(state) is State.ENABLED

def make_state(value):
    """ Convert a raw advertised value into a state.

    Booleans, the integers 1 and 0, and the usual textual spellings of
    true and false are understood. Anything else, including None and
    the -1 some servers use for 'unknown', gives UNSPECIFIED. This
    function never raises.

    :param value: A state, a boolean, an integer, a string or None.
    :rtype: State
    """

    if isinstance(value, State):
        return value

    # bool is a subclass of int, test it first
    if isinstance(value, bool):
        return State.ENABLED if value else State.DISABLED

    if isinstance(value, int):
        if value == 1:
            return State.ENABLED
        elif value == 0:
            return State.DISABLED
        return State.UNSPECIFIED

    if isinstance(value, str):
        value = value.strip().lower()
        if value in ENABLED_VALUES:
            return State.ENABLED
        elif value in DISABLED_VALUES:
            return State.DISABLED

    return State.UNSPECIFIED

def make_capability(forbidden_characters=None, forbidden_names=None, forbidden_extensions=None):
    return Capability(
        make_state(forbidden_characters),
        make_state(forbidden_names),
        make_state(forbidden_extensions))

def _make_list_state(capabilities, key):
    values = capabilities.get(key)

    if not isinstance(values, (list, tuple)):
        return State.UNSPECIFIED

    return State.ENABLED if values else State.DISABLED

def capability_from_server(capabilities):
    """ Build a capability descriptor from server capabilities.

    The capabilities parameter is the 'files' section of the capability
    document advertised by the server (already fetched and decoded by
    the caller). A rule family is enabled when the server advertises a
    non-empty list for it, disabled when the list is empty and
    unspecified when it's missing or isn't a list.

    The whole document can also be passed; the 'files' section is then
    looked up in it.

    :param capabilities: A mapping, or None.
    :rtype: Capability
    """

    if not isinstance(capabilities, dict):
        return Capability()

    if isinstance(capabilities.get('files'), dict):
        capabilities = capabilities['files']

    return Capability(
        _make_list_state(capabilities, 'forbidden_filename_characters'),
        _make_list_state(capabilities, 'forbidden_filenames'),
        _make_list_state(capabilities, 'forbidden_filename_extensions'))

def capability_from_environment(environ=None):
    """ Build a capability descriptor from environment variables.

    It reads NAMEGUARD_FORBIDDEN_CHARACTERS, NAMEGUARD_FORBIDDEN_NAMES
    and NAMEGUARD_FORBIDDEN_EXTENSIONS; unset variables leave the
    matching rule family unspecified.

    :param environ: Mapping to read from, os.environ by default.
    :rtype: Capability
    """

    if environ is None:
        environ = os.environ

    return make_capability(
        environ.get(FORBIDDEN_CHARACTERS_VARIABLE),
        environ.get(FORBIDDEN_NAMES_VARIABLE),
        environ.get(FORBIDDEN_EXTENSIONS_VARIABLE))
