def hash_string(value):
    """Deterministic djb2-xor hash of a string as an unsigned 32-bit int.

    Iterates UTF-16 code units so that identifiers containing astral
    characters hash the same as they do in editor hosts. Lone surrogates,
    such as those os.fsdecode makes from undecodable path bytes, hash as
    the code unit they hold.
    """
    data = value.encode("utf-16-le", "surrogatepass")
    h = 5381
    for i in range(0, len(data), 2):
        unit = data[i] | (data[i + 1] << 8)
        h = (((h << 5) + h) ^ unit) & 0xFFFFFFFF
    return h


def compute_base_hue(identifier, seed=0):
    """Map a workspace identifier and seed to a hue angle in [0, 360).

    The seed is hashed rather than XOR-ed directly so that neighbouring
    seeds produce unrelated hues.
    """
    seed_hash = hash_string(str(seed)) if seed != 0 else 0
    return (hash_string(identifier) ^ seed_hash) % 360
