"""Prompt builders for fixture optimization."""

from __future__ import annotations

from server.models import OptimizationRequest, Participant

SYSTEM_PROMPT_FIXTURE = (
    "You are a tournament optimization expert. Analyze the participants and "
    "create optimal matchups. Reply with a single JSON object only."
)

GOAL_LINES = {
    "balanceSkillLevels": "Balance skill levels across the bracket for competitive matches",
    "avoidSameTeamFirstRound": "Avoid same-team matchups in the first round",
    "prioritizeCompetitiveMatches": "Create exciting, evenly-matched contests",
    "fairScheduling": "Ensure fair scheduling with equal rest times",
}

FORMAT_NAMES = {"knockout": "knockout", "roundrobin": "round-robin"}

REPLY_CONTRACT = """Please provide:
1. An optimized order of participant IDs for the tournament
2. Brief reasoning for your arrangement
3. 2-3 suggestions for tournament organizers

Format your response as JSON:
{
  "order": ["participant_id_1", "participant_id_2", ...],
  "reasoning": "Your reasoning here",
  "suggestions": ["suggestion 1", "suggestion 2", "suggestion 3"]
}"""


def _participant_line(index: int, p: Participant) -> str:
    team = p.teamName or "None"
    rate = p.stats.winRate if p.stats and p.stats.winRate is not None else None
    rate_str = f"{rate:g}%" if rate is not None else "Unknown"
    return f"{index}. {p.name} [id: {p.id}] (Team: {team}, Win Rate: {rate_str})"


def build_optimization_prompt(request: OptimizationRequest) -> str:
    """Render the natural-language optimization request sent to a provider."""
    fmt = FORMAT_NAMES.get(request.format, request.format)
    sections = [
        f"Create an optimal arrangement of participants for a {fmt} tournament.",
        "Participants:\n" + "\n".join(
            _participant_line(i, p) for i, p in enumerate(request.participants, start=1)
        ),
    ]

    goals = request.optimizationGoals.model_dump()
    active = [f"- {line}" for key, line in GOAL_LINES.items() if goals.get(key)]
    if active:
        sections.append("Optimization Goals:\n" + "\n".join(active))

    c = request.constraints
    if c is not None:
        max_per_day = c.maxMatchesPerDay if c.maxMatchesPerDay else "No limit"
        min_rest = c.minRestBetweenMatches or 0
        sections.append(
            "Constraints:\n"
            f"- Max matches per day: {max_per_day}\n"
            f"- Min rest between matches: {min_rest} minutes"
        )

    sections.append(REPLY_CONTRACT)
    return "\n\n".join(sections)
