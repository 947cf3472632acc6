# -*- coding: utf-8 -*-
"""
The GUI Package for the Lore Book Reader.

Contains the PyQt6 widgets used to display transcriptions.
"""
