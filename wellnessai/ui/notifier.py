"""Notifier backed by NiceGUI toasts."""

from nicegui import ui


class UiNotifier:
    def success(self, message: str) -> None:
        ui.notify(message, type="positive")

    def error(self, message: str) -> None:
        ui.notify(message, type="negative")

    def info(self, message: str) -> None:
        ui.notify(message, type="info")
