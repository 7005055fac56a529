import logging
import re
import time

from flask import Flask, Response, request, jsonify

from config import APP_HOST, APP_PORT, LOG_LEVEL, DEFAULT_N, MAX_N
from counter import count_distinct

logging.basicConfig(
    level=getattr(logging, LOG_LEVEL, logging.INFO),
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)
logger = logging.getLogger("work-bottleneck")

app = Flask(__name__)


# ASCII digits with an optional sign; no underscores
INTEGER_RE = re.compile(r"[+-]?[0-9]+")


def parse_n(raw):
    """
    Turns the raw `n` query value into an int, falling back to DEFAULT_N when
    it is missing or blank. Raises ValueError for anything else that is not
    a plain decimal integer or is above MAX_N.
    """
    if raw is None or not raw.strip():
        return DEFAULT_N
    if not INTEGER_RE.fullmatch(raw.strip()):
        raise ValueError("Query parameter 'n' must be an integer")
    n = int(raw)
    if MAX_N and n > MAX_N:
        raise ValueError(f"Query parameter 'n' must not exceed {MAX_N}")
    return n


@app.route('/work')
def work_route():
    raw = request.args.get('n')
    try:
        n = parse_n(raw)
    except ValueError as e:
        logger.warning("Rejected n=%r: %s", raw, e)
        return jsonify({"error": str(e)}), 400

    start = time.perf_counter()
    count = count_distinct(n)
    elapsed_ms = (time.perf_counter() - start) * 1000
    logger.debug("n=%d count=%d took %.2fms", n, count, elapsed_ms)

    return Response(f"Processed {count} items", mimetype="text/plain")


@app.route('/healthz')
def healthz():
    return jsonify({"ok": True})


if __name__ == '__main__':
    app.run(host=APP_HOST, port=APP_PORT)
