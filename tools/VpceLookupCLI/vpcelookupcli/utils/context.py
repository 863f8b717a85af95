"""Stand-in Lambda context for running the custom resource locally."""

import uuid


class LocalInvocationContext:
    """Carries the attributes the handler and its logger read from a Lambda context."""

    function_name = 'vpcelookup-cli'
    function_version = '$LATEST'
    memory_limit_in_mb = 128
    invoked_function_arn = 'arn:aws:lambda:local:000000000000:function:vpcelookup-cli'
    log_group_name = 'local'

    def __init__(self):
        self.aws_request_id = str(uuid.uuid4())
        self.log_stream_name = f"local/{self.aws_request_id}"
