"""Neovim side: redraw-event types and parsing, clipboard text and the nvim command line."""