"""Smooshed Morse web application — Flask backend."""
from __future__ import annotations

import math
import random
import sys
from pathlib import Path

# Ensure project root is on sys.path so `smooshed.*` imports work
_project_root = str(Path(__file__).resolve().parent.parent)
if _project_root not in sys.path:
    sys.path.insert(0, _project_root)

from flask import Flask, jsonify, request

from smooshed.alphabet import random_smalpha
from smooshed.codec import encode, encode_words, smalpha_length
from smooshed.constants import DEFAULT_CHUNK_LIMIT, DEFAULT_TIMEOUT
from smooshed.errors import DecodeError, ValidationError
from smooshed.solver import search, validate_smalpha

app = Flask(__name__)

# Requests may ask for less time than this, never more
MAX_TIMEOUT = DEFAULT_TIMEOUT


def _int_field(data: dict, name: str, default: int | None) -> int | None:
    value = data.get(name, default)
    if value is None:
        return None
    return int(value)


@app.route("/health")
def health():
    return jsonify({"status": "ok", "smalpha_length": smalpha_length()})


@app.route("/encode", methods=["POST"])
def encode_route():
    data = request.get_json(silent=True) or {}
    if not isinstance(data, dict):
        return jsonify({"error": "Expected a JSON object"}), 400
    try:
        if "words" in data:
            words = data["words"]
            if not isinstance(words, list):
                return jsonify({"error": "'words' must be a list"}), 400
            return jsonify({"morse": encode_words(str(w) for w in words)})
        return jsonify({"morse": encode(str(data.get("text", "")))})
    except DecodeError as e:
        return jsonify({"error": str(e)}), 400


@app.route("/random")
def random_route():
    seed = request.args.get("seed", type=int)
    alphabet, morse = random_smalpha(seed=seed)
    return jsonify({"alphabet": alphabet, "morse": morse})


@app.route("/solve", methods=["POST"])
def solve_route():
    data = request.get_json(silent=True) or {}
    if not isinstance(data, dict):
        return jsonify({"error": "Expected a JSON object"}), 400
    try:
        chunk = _int_field(data, "chunk", DEFAULT_CHUNK_LIMIT)
        seed = _int_field(data, "seed", None)
        max_steps = _int_field(data, "max_steps", None)
        timeout = float(data.get("timeout", MAX_TIMEOUT))
    except (TypeError, ValueError, OverflowError) as e:
        return jsonify({"error": f"Bad parameter: {e}"}), 400
    if not math.isfinite(timeout) or timeout <= 0:
        return jsonify({"error": "'timeout' must be a positive number of seconds"}), 400
    timeout = min(timeout, MAX_TIMEOUT)
    if max_steps is not None and max_steps < 1:
        return jsonify({"error": "'max_steps' must be at least 1"}), 400
    if chunk is None or chunk < 1:
        return jsonify({"error": "'chunk' must be at least 1"}), 400

    rng = random.Random(seed)
    morse = data.get("morse")
    alphabet = None
    if morse is None:
        alphabet, morse = random_smalpha(rng)
    morse = str(morse)

    try:
        validate_smalpha(morse)
    except ValidationError as e:
        return jsonify({"error": str(e), "kind": e.kind.value}), 400

    result = search(morse, chunk, rng=rng, max_steps=max_steps,
                    timeout=timeout, quiet=True)
    if not result.found:
        print(f"Solve {result.status.value} for {morse} after {result.steps} candidates")

    return jsonify({
        "morse": morse,
        "generated": alphabet,
        "permutations": [result.permutation or ""],
        "status": result.status.value,
        "steps": result.steps,
        "elapsed": round(result.elapsed, 3),
        "verified": result.found and encode(result.permutation) == morse,
    })


if __name__ == "__main__":
    print(f"Smooshed alphabet length: {smalpha_length()}")
    app.run(debug=True, port=5000)
