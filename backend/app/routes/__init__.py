# Routes package init
"""
MangoNote Backend - API Routes Package
========================================

Route Inventory:
    - notes.py:     GET  /api/notes/recent                 (dashboard summaries)
                    GET  /api/notes/{note_id}              (single note)
    - mindmaps.py:  GET  /api/mindmaps/note/{note_id}      (mind map of a note)
                    GET  /api/mindmaps/{mind_map_id}       (mind map by id)
                    PUT  /api/mindmaps/{mind_map_id}       (partial update)
    - flashcards.py: GET /api/flashcards/{note_id}         (cards of a note)
    - health.py:    GET  /health                           (service health check)

Routes stay thin: extract the identifier, call the service, hand the outcome
to lookup.lookup_and_respond() for the envelope.
"""
