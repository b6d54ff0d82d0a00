import os

class Config:
    # Whole-store JSON snapshot, rewritten on every mutation
    GAMES_DB_PATH = os.environ.get('GAMES_DB_PATH') or 'database.json'
    # Any localhost port, plus file:// pages which send Origin: null
    CORS_ORIGINS = [r'http://localhost.*', 'null']
    CORS_MAX_AGE = int(os.environ.get('CORS_MAX_AGE', '3600'))
    # random.Random-style generator for secrets; None uses the random module
    GAME_RNG = None
    # Dev server bind address (run.py)
    HOST = os.environ.get('HOST') or '127.0.0.1'
    PORT = int(os.environ.get('PORT', '8080'))
