# Slash command modules, loaded by app.py; each exposes setup(app).
