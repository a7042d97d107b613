# Nameguard - Filename acceptability checker for file-sync clients
#
# This file is distributed under the MIT License. See the LICENSE file
# in the root of this project for more information.

from nameguard.result import get_reason, get_payload

class NameguardException(Exception):
    """ Base exception for Nameguard-related exceptions.

    The validation functions themselves never raise; exceptions only
    exist for callers that opted for the raising variant of the name
    validator.
    """

class FileNameError(NameguardException, ValueError):
    """ File name is invalid.

    This exception is raised by :py:func:`ensure_name_valid` when the
    name is refused by one of the naming rules.

    The :py:attr:`failure` attribute is the failure tuple returned by
    :py:func:`validate_name` and :py:attr:`reason` is its reason, so a
    caller can format a localized message without parsing the
    exception text.

    :ivar str name: The refused name.
    :ivar tuple failure: The failure tuple.
    :ivar Reason reason: Why the name was refused.
    """

    def __init__(self, name, failure):
        super(FileNameError, self).__init__(name, failure)

        self.name = name
        self.failure = failure
        self.reason = get_reason(failure)

    @property
    def payload(self):
        return get_payload(self.failure)

    def __str__(self):
        return "invalid file name '{0}' ({1})".format(self.name, self.reason.name)
