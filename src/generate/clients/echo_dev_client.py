# Offline model client for local dev and tests: no API calls.
# Wraps the user prompt in a minimal Framer component so the whole
# pipeline (fence extraction included) can run without a key.

from typing import List, Tuple, Dict, Any
from ..types import Message, ModelParams

ECHO_TEMPLATE = """\
```tsx
// [ECHO RESPONSE]
// {first_line}
import {{ addPropertyControls, ControlType }} from "framer"

export default function EchoComponent(props) {{
    return <div style={{{{ padding: 16 }}}}>{{props.text}}</div>
}}

addPropertyControls(EchoComponent, {{
    text: {{ type: ControlType.String, defaultValue: "FramerBot" }},
}})
```"""


class EchoDevClient:
    def __init__(self):
        self.model = "echo-dev"

    def generate(self, messages: List[Message], params: ModelParams) -> Tuple[str, Dict[str, Any]]:
        user_inputs = [m.content for m in messages if m.role == "user"]
        last = user_inputs[-1] if user_inputs else "(no user input)"
        first_line = last.strip().splitlines()[0] if last.strip() else "(no user input)"
        text = ECHO_TEMPLATE.format(first_line=first_line)
        meta = {"engine": "echo", "model": self.model, "temp": params.temperature, "max_tokens": params.max_tokens}
        return text, meta
