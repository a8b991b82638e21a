from remote_invocation_core.invocation_options.remote_invocation_options import RemoteInvocationOptions


class RemoteInvocationCallConfiguration:
    # each call holds its own snapshot so a shared template can't leak between in-flight calls
    def __init__(self, service_name: str, method_name: str, invocation_options: RemoteInvocationOptions):
        self.service_name = service_name
        self.method_name = method_name
        self.invocation_options = RemoteInvocationOptions.copy_of(invocation_options)

    def to_target_code(self):
        return f"{self.service_name}.{self.method_name}"
