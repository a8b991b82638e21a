from remote_invocation_core.common_util.trace_level_logger import get_logger, TRACE_LEVEL
from remote_invocation_core.common_domain.enum.time_unit import TimeUnit
from remote_invocation_core.common_domain.enum.invocation_mode import InvocationMode
from remote_invocation_core.common_domain.invocation_error import InvocationError
from remote_invocation_core.common_domain.messages.ErrorMessages import ErrorMessages
from remote_invocation_core.common_domain.remote_invocation_exceptions import (
    RemoteInvocationTimeoutException,
    RemoteInvocationAckTimeoutException,
    RemoteInvocationResultTimeoutException,
)
from remote_invocation_core.invocation_options.remote_invocation_options import RemoteInvocationOptions
from remote_invocation_core.invocation_options.remote_invocation_call_configuration import RemoteInvocationCallConfiguration
from remote_invocation_core.invocation_options.messages.invocation_options_validation_messages import (
    InvocationOptionsValidationMessages,
)
from remote_invocation_core.invocation_options.invocation_options_validation_issue import InvocationOptionsValidationIssue
from remote_invocation_core.invocation_options.invocation_options_validator import (
    InvocationOptionsValidator,
    InvocationOptionsValidationException,
)
from remote_invocation_core.invocation_options.invocation_options_loader import InvocationOptionsLoader, InvocationProfile
