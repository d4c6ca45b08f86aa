"""AdventureWorks-Lab.

A SQL study workspace: annotated practice problems that can be executed and
checked, plus a small web service that reads the AdventureWorks2012 sample
database through an ORM.

Core subpackages
----------------

- ``adventureworks_lab.core``:

  - Logging configuration.
  - The database layer: engine/session helpers, SQLModel entities for the
    AdventureWorks tables and the practice schema, and read repositories.

- ``adventureworks_lab.practice``:

  - The catalog of practice problems. Each problem carries a correct
    ("done") query and incorrect ("wrong") attempts with commentary.
  - A sandbox (in-memory SQLite, seeded) and a verifier that runs every
    attempt and checks that the documented outcome is reproduced.

- ``adventureworks_lab.server``:

  - The FastAPI application: AdventureWorks demo controllers, the practice
    API, health endpoints and the global exception handler.

The Markdown study notes live under ``docs/`` at the repository root.
"""

__version__ = "0.1.0"
