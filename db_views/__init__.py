"""
DB Views — read models over the community database.

Usage:
    from db_views.database import create_db_engine
    from db_views.views import PersonQuery, PersonView

    engine, session_factory = create_db_engine()
    admins = await PersonView.admins(session_factory)
"""

__version__ = "0.1.0"
