# Schemas package init: response models live in schemas/responses.py
