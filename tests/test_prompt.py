from datetime import date, time

from celestial.prompt import build_prompt, format_birth_date, format_birth_time


def test_format_birth_date():
    assert format_birth_date(date(1990, 6, 15)) == "June 15, 1990"
    assert format_birth_date(date(2001, 1, 5)) == "January 5, 2001"


def test_format_birth_time():
    assert format_birth_time(time(14, 30)) == "2:30 PM"
    assert format_birth_time(time(0, 5)) == "12:05 AM"
    assert format_birth_time(time(12, 0)) == "12:00 PM"
    assert format_birth_time(time(9, 45)) == "9:45 AM"


def test_build_prompt(request_1990):
    prompt = build_prompt(request_1990)
    assert prompt.startswith("Act as a warm, intuitive, and mystical Astrologer.")
    assert "- Name: Luna Stargazer" in prompt
    assert "- Gender: Female" in prompt
    assert "- Born: June 15, 1990 at 2:30 PM" in prompt
    assert "**Celestial Trinity**" in prompt
    assert prompt.endswith("Use bullet points and bold text for readability.")
    assert "Planetary positions" not in prompt


def test_build_prompt_lists_known_positions(request_1990, make_positions):
    positions = make_positions([84.0, None, 70.5, 51.2, 12.9, 95.3, 293.1])
    prompt = build_prompt(request_1990, positions)
    assert "- Planetary positions: Sun 84° in Gemini, Mercury 70° in Gemini," in prompt
    assert "Moon" not in prompt.split("Planetary positions")[1].split("\n")[0]
