# core package: models, loader and the indexes built from them
