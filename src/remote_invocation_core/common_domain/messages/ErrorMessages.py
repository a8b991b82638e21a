from enum import Enum


class ErrorMessages(Enum):
    ACK_TIMEOUT_ERROR = ('invocation_error:ack:timeout', 'No acknowledgment received from {0} within {1} ms.')
    RESULT_TIMEOUT_ERROR = ('invocation_error:result:timeout', 'No result received from {0} within {1} ms.')

    def __init__(self, key, message):
        self.key = key
        self.message = message
