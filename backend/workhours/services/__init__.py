"""Services Layer: the round store and the operations built on it.

Invariants:
    - Services receive their RoundStore (and through it the AsyncSession) by
      constructor injection; nothing here reaches for a global handle
    - Mutations go through RoundLifecycle or GroupRegistry only
"""
