from . import artist_manager, artwork_manager, exhibition_manager

__all__ = ['artist_manager', 'artwork_manager', 'exhibition_manager']
