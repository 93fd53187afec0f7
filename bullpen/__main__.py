"""Entry point for bullpen package."""

import argparse


def _run_demo(seed: int, class_size: int) -> None:
    """Play one draft, season and offseason for a new Low-A franchise."""
    from bullpen.config import make_random_source
    from bullpen.core.ai import simulate_ai_draft_picks
    from bullpen.core.city import calculate_district_bonuses, generate_initial_city
    from bullpen.core.draft import (
        TeamRecord,
        ai_teams_in_draft_order,
        generate_draft_order,
        get_player_draft_position,
    )
    from bullpen.core.enums import Tier
    from bullpen.core.finances import generate_rookie_contract, simulate_finances
    from bullpen.core.league import AI_TEAMS, get_tier_config
    from bullpen.core.offseason import run_offseason_rollover
    from bullpen.core.progression import (
        check_game_status,
        check_promotion_eligibility,
        create_franchise,
    )
    from bullpen.core.scouting import apply_scouting_result, scout_prospect
    from bullpen.core.season import simulate_season
    from bullpen.core.training import apply_training_result, process_batch_training
    from bullpen.generators import generate_draft_class

    source = make_random_source(seed)
    tier = Tier.LOW_A
    tier_config = get_tier_config(tier)

    print("Bullpen - Franchise Engine (Demo Mode)")
    print("=" * 50)

    franchise = create_franchise()
    city = generate_initial_city(tier, source)
    print(f"{tier_config.name} franchise at {franchise.stadium_name}, "
          f"budget ${franchise.budget:,}, reserves ${franchise.reserves:,}")

    # Draft
    prospects = generate_draft_class(class_size, 1, source)
    board = sorted(prospects, key=lambda p: p.media_rank)
    print(f"\nDraft class: {len(prospects)} prospects")
    for prospect in board[:5]:
        print(f"  #{prospect.media_rank:<4} {prospect.full_name:<24} "
              f"{prospect.position.value:<3} {prospect.archetype.value}")

    top = board[0]
    report = scout_prospect(top, "high", source, available_funds=tier_config.scouting_budget)
    top = apply_scouting_result(top, report)
    print(f"\nScouted {top.full_name}: {report.scouted_rating}/{report.scouted_potential} "
          f"(cost ${report.cost:,})")

    # Expansion club: no prior record, so it picks first
    order = generate_draft_order(TeamRecord("Player Team", 0, 0), AI_TEAMS, 1, source)
    position = get_player_draft_position(order)
    ai_order = ai_teams_in_draft_order(order, AI_TEAMS)
    picks = simulate_ai_draft_picks(ai_order, prospects, 1, position, 1, source=source)
    print(f"\nDrafting from slot {position}; AI teams made {len(picks.picks)} picks first")
    for pick in picks.picks[:3]:
        print(f"  Pick {pick.pick}: {pick.team_id} - {pick.prospect.full_name} ({pick.reason})")

    roster = []
    pool = sorted(picks.remaining_prospects, key=lambda p: p.media_rank)
    for round_number, prospect in enumerate(pool[:10], start=1):
        contract = generate_rookie_contract(prospect.current_rating, prospect.potential, tier)
        roster.append(prospect.to_player(round_number, position, contract.salary, contract.years))

    # Season
    bonuses = calculate_district_bonuses(city.buildings)
    training = process_batch_training(roster, bonuses, franchise.facility_level, 30, source)
    roster = [apply_training_result(p, r) for p, r in zip(roster, training.trained_players)]
    print(f"\nTraining: {training.total_xp_gained} XP, "
          f"{training.players_leveled_up} level-ups")

    season = simulate_season(roster, franchise, city, 1, fan_mult=bonuses.fan_mult, source=source)
    roster = season.players
    win_pct = season.win_pct
    attendance = season.attendance
    print(f"\nSeason: {season.record.wins}-{season.record.losses} "
          f"(rank {season.standings.player_rank} of {len(season.standings.standings)}), "
          f"playoffs: {season.playoff_result.value}")
    if season.bracket is not None:
        print(f"Champion: {season.bracket.champion.name}")
    for event in season.events:
        print(f"  Event: {event.title}")
    city = city.copy(team_pride=season.impact.new_pride, population=season.impact.new_population)

    books = simulate_finances(roster, franchise, city, attendance.total_attendance)
    print(f"Attendance: {attendance.average_attendance:,} per game")
    print(f"Revenue ${books.revenue.total:,}  Expenses ${books.expenses.total:,}  "
          f"Net ${books.net_income:,}")

    status = check_game_status(books.new_reserves, franchise.budget, tier)
    eligibility = check_promotion_eligibility(
        tier, win_pct, books.new_reserves, city.team_pride, 1 if win_pct > 0.5 else 0,
        season.standings.won_division, season.won_championship,
    )
    print(f"\nStatus: {status.status.value}")
    print(f"Promotion eligible: {eligibility.is_eligible}")
    for line in eligibility.missing_criteria:
        print(f"  - {line}")

    offseason = run_offseason_rollover(
        roster, season.record, 1, tier,
        made_playoffs=season.standings.made_playoffs,
        playoff_result=season.playoff_result,
        financials=books,
        avg_attendance=attendance.average_attendance,
        league_rank=season.standings.player_rank,
        source=source,
    )
    print(f"\nOffseason: {len(offseason.players)} players return, "
          f"{len(offseason.free_agents)} free agents; "
          f"year {offseason.new_year} draft slot {offseason.player_draft_position}")


def main() -> None:
    """Main entry point for the Bullpen engine."""
    parser = argparse.ArgumentParser(
        description="Bullpen - minor league franchise simulation engine",
        prog="bullpen",
    )
    parser.add_argument(
        "--demo",
        action="store_true",
        help="Run a one-season demo instead of the API server",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=42,
        help="Seed for the demo (default: 42)",
    )
    parser.add_argument(
        "--class-size",
        type=int,
        default=200,
        help="Draft class size for the demo (default: 200)",
    )
    parser.add_argument("--host", type=str, default=None, help="API host")
    parser.add_argument("--port", type=int, default=None, help="API port")
    parser.add_argument("--reload", action="store_true", help="Auto-reload the API server")

    args = parser.parse_args()

    from bullpen.config import configure_logging

    if args.demo:
        configure_logging("WARNING")
        _run_demo(args.seed, args.class_size)
    else:
        from bullpen.api.main import run_api

        run_api(host=args.host, port=args.port, reload=args.reload)


if __name__ == "__main__":
    main()
