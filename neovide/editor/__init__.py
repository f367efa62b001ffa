"""Editor model: styles, cursor, character grids, windows and draw-command batching."""