"""
main.py - runner to load the CSV snapshot and rank a team's open slots
for one candidate, or rank candidates for one slot with --slot.
"""
import argparse
import logging

from positionfit.config import BASE, configure_logging
from positionfit.frames import load_snapshot
from positionfit.pipeline import candidate_summary, recommend_slots, recommend_applicants


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Rank position slots by fit score.")
    parser.add_argument("candidate_id", nargs="?", help="Profile id to rank slots for")
    parser.add_argument("--team", default=None, help="Only consider slots of this team")
    parser.add_argument("--slot", default=None, help="Rank all candidates for this slot instead")
    parser.add_argument("--top", type=int, default=10, help="How many applicants to show with --slot")
    parser.add_argument("--data", default=BASE, help="Directory holding the snapshot CSVs")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)
    configure_logging(logging.DEBUG if args.verbose else None)
    frames = load_snapshot(args.data)

    if args.slot:
        print(f"Top candidates for slot {args.slot} (candidate_id, score):")
        for r in recommend_applicants(args.slot, frames=frames, top_k=args.top):
            print(r["candidate_id"], r["score"])
        return 0

    if not args.candidate_id:
        print("candidate_id is required unless --slot is given")
        return 2

    summary = candidate_summary(args.candidate_id, frames=frames)
    if summary is None:
        print(f"Unknown candidate {args.candidate_id}")
        return 1
    print(f"Candidate {args.candidate_id}: Lv.{summary['level']} {summary['level_name']} "
          f"({summary['level_score']:.1f} pts)")
    if summary["points_to_next"] is not None:
        print(f"  {summary['progress']:.0f}% to next level, {summary['points_to_next']:.0f} pts needed")

    print(f"Slots for candidate {args.candidate_id} (label, score, status):")
    for opt in recommend_slots(args.candidate_id, team_id=args.team, frames=frames):
        if not opt["available"]:
            status = "full"
        elif not opt["selectable"]:
            status = f"needs Lv.{opt['min_level']}"
        else:
            status = opt["tier"]
        print(opt["slot_id"], opt["label"], opt["count"], opt["score"], status)
        if args.verbose and opt.get("explanation"):
            print("  " + opt["explanation"].replace("\n", "\n  "))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
