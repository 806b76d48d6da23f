"""Actor handle allocation service.

HandleAllocator manages handle lifecycle for the in-memory world.
"""

from __future__ import annotations

from arenazone.core.identity import ActorHandle

_FIRST_INDEX = 1
"""Index 0 is reserved for ActorHandle.NULL."""


class HandleAllocator:
    """Allocates actor handles with generation tracking for recycling.

    Freed indices are reissued with an incremented generation, so a handle
    held across a despawn/respawn cycle is detectably stale.
    """

    def __init__(self) -> None:
        self._next_index = _FIRST_INDEX
        self._free_list: list[tuple[int, int]] = []  # (index, generation)
        self._generations: dict[int, int] = {}

    def allocate(self) -> ActorHandle:
        """Allocate a handle, reusing recycled slots when available.

        Returns:
            Newly allocated ActorHandle.
        """
        if self._free_list:
            index, gen = self._free_list.pop()
            return ActorHandle(index=index, generation=gen)

        index = self._next_index
        self._next_index += 1
        self._generations[index] = 0
        return ActorHandle(index=index, generation=0)

    def deallocate(self, handle: ActorHandle) -> None:
        """Return handle for reuse with incremented generation.

        Args:
            handle: Handle to release.

        Raises:
            ValueError: If handle is null or already stale.
        """
        if handle.is_null():
            raise ValueError("Cannot deallocate the null handle")
        if not self.is_alive(handle):
            raise ValueError(f"Cannot deallocate stale handle {handle}")

        new_gen = handle.generation + 1
        self._generations[handle.index] = new_gen
        self._free_list.append((handle.index, new_gen))

    def is_alive(self, handle: ActorHandle) -> bool:
        """Check if handle is still valid (not recycled).

        Returns:
            True if handle's generation is current, False otherwise.
        """
        if handle.is_null():
            return False
        return self._generations.get(handle.index, -1) == handle.generation
