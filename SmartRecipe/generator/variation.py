from SmartRecipe.generator.templates import TEMPLATE_POOLS


def select_variation(pool_name: str, rng) -> str:
    """
    Pick one phrase from a named template pool.

    Consumes exactly one draw (rng.randrange) and is otherwise side-effect free.
    An unknown pool name is a programming error and raises KeyError.
    """
    try:
        pool = TEMPLATE_POOLS[pool_name]
    except KeyError:
        raise KeyError(f"Unknown template pool: {pool_name}") from None
    return pool[rng.randrange(len(pool))]
