"""Logging utilities for seafshare modules."""

import logging


def get_logger(name: str) -> logging.Logger:
    """Get a logger that inherits from the root logger.
    
    The logger propagates to root, and only gets a default level when
    basicConfig() has not been called yet.
    
    Args:
        name: Logger name (typically 'seafshare.<area>')
        
    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(name)
    logger.propagate = True
    
    root_logger = logging.getLogger()
    if not root_logger.handlers:
        logger.setLevel(logging.WARNING)
    
    return logger
