"""
Core services: configuration, YouTube access, analysis and commands
"""
