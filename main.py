# main.py
import argparse
import logging
import numpy as np
from orchestra.engine import Orchestra
from orchestra.generator import SCENARIO_DEFINITIONS, generate_market, get_scenario
from orchestra.diagnostics import Diagnostics
from orchestra.baselines import idle_agent, practice_agent, touring_agent, smart_agent_wrapper
from orchestra.config import INITIAL_BUDGET
from colorama import Fore, Style, init

init(autoreset=True)

AGENTS = {
    "Idle": idle_agent,
    "Practice": practice_agent,
    "Touring": touring_agent,
    "Smart": smart_agent_wrapper,
}


def run_simulation(scenario_id="O-01", agent_func=smart_agent_wrapper, total_weeks=52, verbose=False):
    scenario = get_scenario(scenario_id)
    overrides = scenario['config_overrides']

    if verbose:
        print(f"{Fore.CYAN}Initializing Orchestra-Bench Scenario: {scenario_id} ({scenario['name']}){Style.RESET_ALL}")

    orchestra = Orchestra("The Bench Players", budget=overrides.get('initial_budget', INITIAL_BUDGET))
    rng = np.random.RandomState(scenario['seed'])
    diagnostics = Diagnostics(scenario_id)

    # Initial Observation
    obs = orchestra._create_observation(orchestra.state)
    obs['_internal_metrics'] = {'orchestra_value': 0, 'week_summary': {}}

    for _ in range(total_weeks):
        market = generate_market(obs['week'], rng, overrides)

        if verbose:
            print(f"\n{Fore.YELLOW}--- WEEK {obs['week']} ---{Style.RESET_ALL}")
            print(f"Budget: ${obs['budget']} | XP: {obs['experience']} | Practice: {obs['practice_minutes']} min")

        # Agent decides
        action = agent_func(obs, market)

        # Engine steps
        obs = orchestra.step(action)

        diagnostics.record_step(orchestra.state, action, orchestra.last_results, orchestra.last_week)

        if verbose:
            for log in obs['daily_logs']:
                if "declined" in log:
                    print(f"{Fore.RED}{log}{Style.RESET_ALL}")
                elif log.startswith("WEEK:"):
                    print(f"{Fore.LIGHTBLACK_EX}{log}{Style.RESET_ALL}")
                else:
                    print(log)

    value = obs['_internal_metrics']['orchestra_value']
    report = diagnostics.generate_report()

    if verbose:
        print(f"\n{Fore.GREEN}Season Complete.{Style.RESET_ALL}")
        print(f"Final Orchestra Value: ${value}")
        print("\n=== DIAGNOSTIC REPORT ===")
        print(f"Strategy: {report['strategy']}")
        print(f"Final Budget: ${report['final_budget']}")
        print(f"Final Experience: {report['final_experience']}")
        print(f"Declined Actions: {report['metrics']['declined']}")
        print("=========================")

    return value


def run_baseline(total_weeks=52):
    print(f"{Fore.MAGENTA}=== STARTING COMPREHENSIVE BASELINE RUN ==={Style.RESET_ALL}")

    print(f"{'Scenario':<20} | " + " | ".join(f"{name:<10}" for name in AGENTS))
    print("-" * 80)

    for s_def in SCENARIO_DEFINITIONS:
        print(f"{s_def['id']:<20} | ", end="", flush=True)
        for name, func in AGENTS.items():
            value = run_simulation(s_def['id'], agent_func=func, total_weeks=total_weeks, verbose=False)
            color = Fore.GREEN if value > INITIAL_BUDGET else Fore.RED
            print(f"{color}${value:,}{Style.RESET_ALL}".ljust(13), end="")
        print()


def main():
    parser = argparse.ArgumentParser(description="Run a season of Orchestra-Bench")
    parser.add_argument("--single", action="store_true", help="Run one scenario verbosely")
    parser.add_argument("--scenario", type=str, default="O-01", help="Scenario ID")
    parser.add_argument("--agent", type=str, default="Smart", choices=sorted(AGENTS), help="Agent to play")
    parser.add_argument("--weeks", type=int, default=52, help="Weeks to simulate")
    parser.add_argument("--debug", action="store_true", help="Show engine debug logging")
    args = parser.parse_args()

    logging.basicConfig(level=logging.DEBUG if args.debug else logging.WARNING,
                        format="%(levelname)s %(name)s: %(message)s")

    if args.single:
        run_simulation(args.scenario, agent_func=AGENTS[args.agent], total_weeks=args.weeks, verbose=True)
    else:
        run_baseline(args.weeks)


if __name__ == "__main__":
    main()
