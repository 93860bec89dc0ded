from __future__ import annotations

from prime_sieve.kernel.env import StageEnv, unit_entry
from prime_sieve.ports.stream import WriteEnd

FIRST_CANDIDATE = 2


def candidate_range(limit: int) -> range:
    # Empty when limit < 2.
    return range(FIRST_CANDIDATE, limit + 1)


@unit_entry
def run_feeder(sink: WriteEnd, env: StageEnv, limit: int) -> None:
    written = 0
    with sink:
        for value in candidate_range(limit):
            sink.write(value)
            written += 1
    env.log.debug("feeder.finished", limit=limit, written=written)
