"""Record services: database reads and writes"""
