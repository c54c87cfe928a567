class RunSettings:
    trace: bool
    strict_opcodes: bool
    prompt: str | None

    def __init__(self):
        self.trace = False
        self.strict_opcodes = False
        self.prompt = None

    def update(
        self,
        trace: bool | None = None,
        strict_opcodes: bool | None = None,
        prompt: str | None = None
    ):
        if trace is not None:
            self.trace = trace

        if strict_opcodes is not None:
            self.strict_opcodes = strict_opcodes

        if prompt is not None:
            self.prompt = prompt

        return self
