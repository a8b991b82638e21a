from datetime import timedelta

from pydantic import BaseModel, ConfigDict, field_validator

from remote_invocation_core.common_domain.enum.invocation_mode import InvocationMode
from remote_invocation_core.common_domain.enum.time_unit import TimeUnit


class RemoteInvocationOptions(BaseModel):
    """
    Remote invocation options.

    Tells a remote service client how to behave with regard to the acknowledgment of an invocation
    and the wait for its result. Instances are immutable; every mutator returns a new instance.

    Examples:
        # 1 second ack timeout and 30 seconds execution timeout
        options = RemoteInvocationOptions.defaults()

        # no ack but 30 seconds execution timeout
        options = RemoteInvocationOptions.defaults().no_ack()

        # 1 second ack timeout then forget the result
        options = RemoteInvocationOptions.defaults().no_result()

        # 1 minute ack timeout then forget about the result
        options = RemoteInvocationOptions.defaults().expect_ack_within(1, TimeUnit.MINUTES).no_result()

        # no ack and forget about the result (fire and forget)
        options = RemoteInvocationOptions.defaults().no_ack().no_result()
    """
    model_config = ConfigDict(frozen=True)

    # None means the corresponding exchange is skipped entirely, not that it times out instantly
    ack_timeout: timedelta | None
    result_timeout: timedelta | None

    @field_validator('ack_timeout', 'result_timeout', mode='before')
    @classmethod
    def interpret_int_as_millis(cls, value):
        # bare ints are milliseconds, as in the mutators, not pydantic's default of seconds
        if isinstance(value, int) and not isinstance(value, bool):
            return TimeUnit.MILLISECONDS.to_duration(value)
        return value

    @staticmethod
    def defaults() -> 'RemoteInvocationOptions':
        """
        Opinionated defaults; equivalent to expecting an ack within 1 second and a result within 30 seconds.
        """
        return RemoteInvocationOptions(ack_timeout=TimeUnit.SECONDS.to_duration(1),
                                       result_timeout=TimeUnit.SECONDS.to_duration(30))

    @staticmethod
    def copy_of(options: 'RemoteInvocationOptions') -> 'RemoteInvocationOptions':
        return options.model_copy()

    @property
    def ack_timeout_in_millis(self) -> int | None:
        return None if self.ack_timeout is None else TimeUnit.MILLISECONDS.from_duration(self.ack_timeout)

    @property
    def result_timeout_in_millis(self) -> int | None:
        return None if self.result_timeout is None else TimeUnit.MILLISECONDS.from_duration(self.result_timeout)

    @property
    def invocation_mode(self) -> InvocationMode:
        match (self.is_ack_expected(), self.is_result_expected()):
            case (True, True):
                return InvocationMode.ACK_AND_RESULT
            case (True, False):
                return InvocationMode.ACK_ONLY
            case (False, True):
                return InvocationMode.RESULT_ONLY
            case _:
                return InvocationMode.FIRE_AND_FORGET

    def is_ack_expected(self) -> bool:
        return self.ack_timeout is not None

    def is_result_expected(self) -> bool:
        return self.result_timeout is not None

    def expect_ack_within(self, ack_timeout: int | timedelta,
                          time_unit: TimeUnit = TimeUnit.MILLISECONDS) -> 'RemoteInvocationOptions':
        return self.model_copy(update={'ack_timeout': RemoteInvocationOptions.normalize_timeout(ack_timeout, time_unit)})

    def no_ack(self) -> 'RemoteInvocationOptions':
        return self.model_copy(update={'ack_timeout': None})

    def expect_result_within(self, result_timeout: int | timedelta,
                             time_unit: TimeUnit = TimeUnit.MILLISECONDS) -> 'RemoteInvocationOptions':
        return self.model_copy(update={'result_timeout': RemoteInvocationOptions.normalize_timeout(result_timeout, time_unit)})

    def no_result(self) -> 'RemoteInvocationOptions':
        return self.model_copy(update={'result_timeout': None})

    @staticmethod
    def normalize_timeout(timeout: int | timedelta, time_unit: TimeUnit) -> timedelta:
        if isinstance(timeout, timedelta):
            return timeout
        return time_unit.to_duration(timeout)
