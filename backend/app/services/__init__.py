# Services package init
"""
MangoNote Backend - Services Layer
====================================

Business logic between routes (HTTP) and the database.

Service Inventory:
    - NoteService: note lookup and recent-notes listing
    - MindMapService: mind map lookup by note or id, partial update
    - FlashcardService: cards of a note with review statistics
    - identifiers: path identifier parsing and owner scoping

Services never build HTTP responses. They return schema objects (or None for
"not found") and raise application exceptions from app.exceptions.
"""
