"""Run learner JavaScript snippets and compare captured console output."""
import json
import logging
from typing import Optional

from py_mini_racer import JSEvalException, JSOOMException, JSTimeoutException, MiniRacer

from js_lab.config import RUN_TIMEOUT_MS
from js_lab.models import RunResult

logger = logging.getLogger(__name__)

# The snippet becomes the body of a function whose only parameter is a
# console replacement. Errors are reported as the thrown value's message.
HARNESS = """
(function () {
  var lines = [];
  var capture = {
    log: function () {
      var parts = [];
      for (var i = 0; i < arguments.length; i++) {
        var arg = arguments[i];
        parts.push(typeof arg === 'object' ? JSON.stringify(arg) : String(arg));
      }
      lines.push(parts.join(' '));
    }
  };
  try {
    new Function('console', %s)(capture);
  } catch (e) {
    return JSON.stringify({lines: lines, error: String(e == null ? e : e.message)});
  }
  return JSON.stringify({lines: lines, error: null});
})()
"""


def build_program(source: str) -> str:
    return HARNESS % json.dumps(source)


class CodeSandbox:
    """Executes each snippet in a fresh V8 context with only a console to talk to."""

    def __init__(self, timeout_ms: Optional[int] = RUN_TIMEOUT_MS):
        self.timeout_ms = timeout_ms

    def execute(self, source: str) -> tuple[list[str], Optional[str]]:
        """Return (captured lines, error message or None)."""
        context = MiniRacer()
        try:
            raw = context.eval(build_program(source), timeout=self.timeout_ms)
        except (JSEvalException, JSTimeoutException, JSOOMException) as exc:
            logger.debug("Snippet aborted by the engine: %s", exc)
            return [], str(exc)
        payload = json.loads(raw)
        return payload["lines"], payload["error"]

    def run(self, source: str, expected_output: str) -> RunResult:
        """Run ``source`` and judge its output against ``expected_output`` byte for byte."""
        lines, error = self.execute(source)
        if error is not None:
            return RunResult(
                output=f"Error: {error}", is_correct=False, expected=expected_output, error=True
            )
        output = "\n".join(lines)
        is_correct = output == expected_output
        logger.debug("Snippet produced %d line(s), correct=%s", len(lines), is_correct)
        return RunResult(output=output, is_correct=is_correct, expected=expected_output)
