import argparse
import asyncio
import sys

import chess

from engine import StockfishClient
from errors import BestMoveError
from schemas import DEFAULT_DEPTH, AnalysisFailure, AnalysisRequest
from settings import STOCKFISH_API_URL


def bestmove_uci(bestmove: str) -> str:
    """Extract the move from the API's "bestmove e2e4 ponder e7e5" form."""
    parts = bestmove.split()
    if len(parts) >= 2 and parts[0] == "bestmove":
        return parts[1]
    return parts[0] if parts else ""


def to_san(fen: str, uci: str) -> str | None:
    """Return the move in SAN, or None if python-chess rejects the position or move."""
    try:
        board = chess.Board(fen)
        move = chess.Move.from_uci(uci)
    except ValueError:
        return None
    if not board.is_legal(move):
        return None
    return board.san(move)


def main(argv=None):
    p = argparse.ArgumentParser(description="Chess Best Move (CLI, no payment)")
    p.add_argument("--fen", required=True, help="FEN string")
    p.add_argument("--depth", default=DEFAULT_DEPTH, help="Analysis depth (default: 10)")
    p.add_argument("--api-url", default=STOCKFISH_API_URL, help="Stockfish API endpoint")
    args = p.parse_args(argv)

    client = StockfishClient(args.api_url)
    try:
        result = asyncio.run(client.analyze(AnalysisRequest(fen=args.fen, depth=args.depth)))
    except BestMoveError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if isinstance(result, AnalysisFailure):
        print(f"Stockfish error: {result.error}", file=sys.stderr)
        return 1

    uci = bestmove_uci(result.bestmove)
    san = to_san(args.fen, uci)
    print(f"Best move: {uci}" + (f" ({san})" if san else ""))
    print(f"Evaluation: {result.evaluation}")
    print(f"Mate: {result.mate if result.mate is not None else '-'}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
