from remote_invocation_core.common_domain.invocation_error import InvocationError
from remote_invocation_core.common_domain.messages.ErrorMessages import ErrorMessages


class RemoteInvocationTimeoutException(Exception):
    error_message_type: ErrorMessages

    def __init__(self, target: str, timeout_in_millis: int):
        self.target = target
        self.timeout_in_millis = timeout_in_millis
        super().__init__(self.error_message_type.message.format(target, timeout_in_millis))

    def to_invocation_error(self) -> InvocationError:
        return InvocationError(error_type=self.error_message_type.key, error_message=str(self))


class RemoteInvocationAckTimeoutException(RemoteInvocationTimeoutException):
    error_message_type = ErrorMessages.ACK_TIMEOUT_ERROR

    @staticmethod
    def for_call(call_configuration) -> 'RemoteInvocationAckTimeoutException':
        invocation_options = call_configuration.invocation_options
        if not invocation_options.is_ack_expected():
            raise ValueError(f"No ack was expected for {call_configuration.to_target_code()}; it cannot time out")
        return RemoteInvocationAckTimeoutException(call_configuration.to_target_code(),
                                                   invocation_options.ack_timeout_in_millis)


class RemoteInvocationResultTimeoutException(RemoteInvocationTimeoutException):
    error_message_type = ErrorMessages.RESULT_TIMEOUT_ERROR

    @staticmethod
    def for_call(call_configuration) -> 'RemoteInvocationResultTimeoutException':
        invocation_options = call_configuration.invocation_options
        if not invocation_options.is_result_expected():
            raise ValueError(f"No result was expected for {call_configuration.to_target_code()}; it cannot time out")
        return RemoteInvocationResultTimeoutException(call_configuration.to_target_code(),
                                                      invocation_options.result_timeout_in_millis)
