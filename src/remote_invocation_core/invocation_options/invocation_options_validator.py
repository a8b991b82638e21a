import json
from datetime import timedelta

from remote_invocation_core.invocation_options.invocation_options_validation_issue import InvocationOptionsValidationIssue
from remote_invocation_core.invocation_options.messages.invocation_options_validation_messages import InvocationOptionsValidationMessages
from remote_invocation_core.invocation_options.remote_invocation_options import RemoteInvocationOptions


class InvocationOptionsValidationException(Exception):
    pass


class InvocationOptionsValidator:
    @staticmethod
    # returns a list of validation issues found in the options; if empty, the options are valid
    def is_options_valid(invocation_options: RemoteInvocationOptions) -> tuple[bool, list]:
        validation_issues = []

        if invocation_options.is_ack_expected() and invocation_options.ack_timeout <= timedelta(0):
            validation_issues.append(InvocationOptionsValidationIssue(
                InvocationOptionsValidationMessages.NON_POSITIVE_ACK_TIMEOUT, invocation_options.ack_timeout_in_millis))

        if invocation_options.is_result_expected() and invocation_options.result_timeout <= timedelta(0):
            validation_issues.append(InvocationOptionsValidationIssue(
                InvocationOptionsValidationMessages.NON_POSITIVE_RESULT_TIMEOUT, invocation_options.result_timeout_in_millis))

        return len(validation_issues) == 0, validation_issues

    @staticmethod
    def validate_or_raise(invocation_options: RemoteInvocationOptions) -> RemoteInvocationOptions:
        is_valid, validation_issues = InvocationOptionsValidator.is_options_valid(invocation_options)
        if not is_valid:
            raise InvocationOptionsValidator.build_validation_exception(validation_issues)
        return invocation_options

    @staticmethod
    def build_validation_exception(validation_issues: list) -> InvocationOptionsValidationException:
        exception = InvocationOptionsValidationException(InvocationOptionsValidationMessages.OPTIONS_VALIDATION_FAILED.key)
        exception.add_note(json.dumps([vars(issue) for issue in validation_issues]))
        return exception
