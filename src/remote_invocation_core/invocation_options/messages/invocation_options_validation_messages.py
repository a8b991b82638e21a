from enum import Enum


class InvocationOptionsValidationMessages(Enum):
    NON_POSITIVE_ACK_TIMEOUT = ("non-positive-ack-timeout", "Ack timeout must be positive: {0} ms")
    NON_POSITIVE_RESULT_TIMEOUT = ("non-positive-result-timeout", "Result timeout must be positive: {0} ms")
    UNKNOWN_INVOCATION_PROFILE = ("unknown-invocation-profile", "Unknown invocation profile: {0}")
    INVALID_TIMEOUT_SETTING = ("invalid-timeout-setting", "Invalid value for '{0}': {1}")
    OPTIONS_VALIDATION_FAILED = ("options-validation-failed", "Invocation options validation failed.")

    def __init__(self, key, message):
        self.key = key
        self.message = message
