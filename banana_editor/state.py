###############################################################################
# Editor state  – one record, one mutation per user action
###############################################################################
from dataclasses import dataclass, field

from banana_editor.intake import SourceImage
from banana_editor.request import DEFAULT_MODEL, missing_fields
from banana_editor.stream import ResultImage


@dataclass
class EditorState:
    credential: str = ""
    prompt:     str = ""
    model:      str = DEFAULT_MODEL
    source:     SourceImage | None = None
    result:     ResultImage | None = None
    commentary: list[str] = field(default_factory=list)
    busy:       bool = False
    error:      str | None = None

    # ---- form edits ---------------------------------------------------------
    def set_credential(self, credential: str) -> None:
        self.credential = credential

    def set_prompt(self, prompt: str) -> None:
        self.prompt = prompt

    def set_model(self, model: str) -> None:
        self.model = model

    def select_image(self, source: SourceImage) -> None:
        """A new source image invalidates whatever was generated from the old one."""
        self.source     = source
        self.result     = None
        self.commentary = []

    # ---- generation lifecycle -----------------------------------------------
    def begin(self) -> None:
        self.busy  = True
        self.error = None

    def complete(self, result: ResultImage, commentary=()) -> None:
        self.result     = result
        self.commentary = list(commentary)
        self.error      = None

    def fail(self, message: str) -> None:
        self.error = message

    def finish(self) -> None:
        self.busy = False

    @property
    def can_submit(self) -> bool:
        return not self.busy and not missing_fields(self.credential, self.source, self.prompt)
