import os
from importlib import resources

import yaml
from pydantic import BaseModel, TypeAdapter

from remote_invocation_core.common_domain.enum.time_unit import TimeUnit
from remote_invocation_core.common_util.trace_level_logger import get_logger
from remote_invocation_core.invocation_options.invocation_options_validation_issue import InvocationOptionsValidationIssue
from remote_invocation_core.invocation_options.invocation_options_validator import InvocationOptionsValidator, \
    InvocationOptionsValidationException
from remote_invocation_core.invocation_options.messages.invocation_options_validation_messages import InvocationOptionsValidationMessages
from remote_invocation_core.invocation_options.remote_invocation_options import RemoteInvocationOptions

logger = get_logger(__name__)

DEFAULT_PROFILE_NAME = 'default'
NO_TIMEOUT_SETTING = 'none'


class InvocationProfile(BaseModel):
    name: str
    ack_timeout_ms: int | None = None
    result_timeout_ms: int | None = None

    def to_invocation_options(self) -> RemoteInvocationOptions:
        return RemoteInvocationOptions(
            ack_timeout=None if self.ack_timeout_ms is None else TimeUnit.MILLISECONDS.to_duration(self.ack_timeout_ms),
            result_timeout=None if self.result_timeout_ms is None else TimeUnit.MILLISECONDS.to_duration(self.result_timeout_ms)
        )


class InvocationOptionsLoader:
    def __init__(self, log_level=None):
        self.logger = logger.getChild(self.__class__.__name__)
        if log_level is not None:
            self.logger.setLevel(log_level)

    @staticmethod
    def load_invocation_profiles() -> dict[str, RemoteInvocationOptions]:
        """
        Reads the packaged invocation profiles from a configuration yaml and returns them as a dict (map).
        :return: dict of invocation options with profile name as key
        """
        profiles_file = resources.files('remote_invocation_core.resources').joinpath('invocation_profiles.yaml')
        with profiles_file.open('r') as file:
            profiles_yaml = yaml.safe_load(file)
            profile_type_adapter = TypeAdapter(list[InvocationProfile])
            profiles_list = profile_type_adapter.validate_python(profiles_yaml['invocation_profiles'])
            return {profile.name: profile.to_invocation_options() for profile in profiles_list}

    def load_profile(self, profile_name: str) -> RemoteInvocationOptions:
        profiles = InvocationOptionsLoader.load_invocation_profiles()
        if profile_name not in profiles:
            raise InvocationOptionsValidator.build_validation_exception([InvocationOptionsValidationIssue(
                InvocationOptionsValidationMessages.UNKNOWN_INVOCATION_PROFILE, profile_name)])
        self.logger.trace(f"Loaded invocation profile '{profile_name}': {profiles[profile_name]}")
        return profiles[profile_name]

    def from_environment(self, environ=None) -> RemoteInvocationOptions:
        """
        Builds invocation options from environment settings. Starts from the profile named by 'invocation_profile'
        and applies 'ack_timeout_ms' and 'result_timeout_ms' overrides; the value 'none' skips that exchange.
        A 'log_level' setting sets the level of this loader's logger.
        """
        if environ is None:
            environ = os.environ

        if 'log_level' in environ:
            self.logger.setLevel(environ['log_level'])

        profile_name = environ.get('invocation_profile', DEFAULT_PROFILE_NAME)
        invocation_options = self.load_profile(profile_name)

        if 'ack_timeout_ms' in environ:
            ack_timeout_ms = InvocationOptionsLoader.parse_timeout_setting('ack_timeout_ms', environ['ack_timeout_ms'])
            invocation_options = invocation_options.no_ack() if ack_timeout_ms is None \
                else invocation_options.expect_ack_within(ack_timeout_ms)

        if 'result_timeout_ms' in environ:
            result_timeout_ms = InvocationOptionsLoader.parse_timeout_setting('result_timeout_ms', environ['result_timeout_ms'])
            invocation_options = invocation_options.no_result() if result_timeout_ms is None \
                else invocation_options.expect_result_within(result_timeout_ms)

        try:
            InvocationOptionsValidator.validate_or_raise(invocation_options)
        except InvocationOptionsValidationException as validation_exception:
            self.logger.warning(f"Rejecting invocation options from environment: {validation_exception.__notes__[0]}")
            raise

        self.logger.debug(f"Invocation options from environment: mode={invocation_options.invocation_mode}, "
                          f"ack={invocation_options.ack_timeout_in_millis} ms, "
                          f"result={invocation_options.result_timeout_in_millis} ms")
        return invocation_options

    @staticmethod
    def parse_timeout_setting(setting_name: str, setting_value: str) -> int | None:
        if setting_value.strip().lower() == NO_TIMEOUT_SETTING:
            return None
        try:
            return int(setting_value)
        except ValueError:
            raise InvocationOptionsValidator.build_validation_exception([InvocationOptionsValidationIssue(
                InvocationOptionsValidationMessages.INVALID_TIMEOUT_SETTING, setting_name, setting_value)])
