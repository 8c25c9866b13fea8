from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class WizardSessionKeys:
    """Namespaced session-state keys for wizard navigation storage."""

    wizard_id: str

    @property
    def prefix(self) -> str:
        return f"wiz:{self.wizard_id}:"

    def namespace(self, key: str) -> str:
        return f"{self.prefix}{key}"

    @property
    def current_path(self) -> str:
        return self.namespace("current_path")

    @property
    def pending_navigation(self) -> str:
        return self.namespace("pending_navigation")

    @property
    def scroll_to_top(self) -> str:
        return self.namespace("scroll_to_top")
