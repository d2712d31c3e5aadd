"""Hook-routed resolution pipeline.

One player turn runs up to three passes over the same Session:
  1. input    clean previously emitted [AIDCHAOS ...] markers.
  2. context  only for "do" actions: resolve settings (Class/Race inheritance
              on first use), detect attributes in the last action, roll each,
              stash the results in session state, append the guidance block.
  3. output   when result output is enabled, take the stashed results and
              prepend the one-line marker to the narrator's text.

Text that looks like another tool's command or output is passed through
untouched on every pass.
"""

from .hooks import (  # noqa: F401
    Bypass,
    PassResult,
    Session,
    context_pass,
    input_pass,
    on_context,
    on_input,
    on_output,
    output_pass,
    run_hook,
)
