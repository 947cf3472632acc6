# -*- coding: utf-8 -*-
"""
The Utilities Package for the Lore Book Reader.

Modules:
- clipboard_manager: copies transcriptions to the system clipboard.
- hotkey_manager: global hotkey listener that triggers a read.
"""
