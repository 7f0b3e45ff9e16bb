"""Configuração: settings de ambiente e logging."""
