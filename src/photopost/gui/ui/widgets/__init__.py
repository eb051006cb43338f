"""Reusable Qt widgets for the photopost uploader.

Widgets are imported from their modules directly (for example
``photopost.gui.ui.widgets.crop_overlay``) so the pure crop geometry in
:mod:`.crop_box` stays importable without QtWidgets.
"""
