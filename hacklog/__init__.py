# hacklog/__init__.py
"""
Backend de HackLog: registro de proyectos de hackathon y portafolio
público por usuario.
"""
