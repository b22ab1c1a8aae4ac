# xpslash

Slash command definitions and interaction-handling helpers for a chat leveling
bot: users earn experience from messages, climb a per-server leaderboard, get
role rewards at set levels and customise their rank card.

The package has no runtime dependencies.

## What is in it

- **Command schemas**
  - `xpslash.schema`: `Command`, `CommandOption`, `subcommand()`, the
    `OptionType`, `CommandType`, `ChannelType` and `Permissions` enums, and
    `validate_command()`, which checks names, descriptions, option counts,
    option ordering, length and value limits, and raises
    `CommandValidationError`.
  - `xpslash.admin_defs`, `card_defs`, `config_defs`, `experience_defs`,
    `gdpr_defs`, `levels_defs`, `manage_defs`, `rewards_defs`: one function
    per command (`admin_command()`, `card_command()`, `guild_card_command()`,
    `config_command()`, `xp_command()`, `gdpr_command()`,
    `leaderboard_command()`, `rank_command()`, `manage_command()`,
    `rewards_command()`).
  - `xpslash.registry`: `get_commands()` (the global commands, including the
    "Get level" user and "Get author level" message context commands),
    `admin_commands()`, `help_command()` and `context_command()`.
- **Responses**
  - `xpslash.response`: the immutable `SlashResponse` with `with_embed_text()`,
    `with_changes()`, `ephemeral()`, `to_data()`, `from_data()` and
    `to_interaction_response()`; `MessageFlags` and `InteractionResponseType`.
  - `xpslash.errors`: `SlashError`, carrying an `ErrorKind` and an optional
    detail, with `to_response()` giving the ephemeral error reply.
  - `xpslash.help`: `help_response()`.
- **Logic helpers**
  - `xpslash.leaderboard`: `render_leaderboard()`, `control_options()`,
    `page_for_rank()`, `parse_jump_input()`, `jump_modal()` and
    `component_target()`.
  - `xpslash.config_checks`: `validate_xp_range()`, `safecast_to_i16()`,
    `check_level_up_message()`, `check_level_up_channel()` and
    `perms_report()`.
  - `xpslash.permissions`: `PermissionCache`, `RoleInfo`,
    `can_manage_roles()` returning a `CanAddRole`, `can_create_message()`
    and `snowflake_to_timestamp()`.
  - `xpslash.card_edit`: `ConfigItem`, `resolve_choice()` and `fake_user()`.
  - `xpslash.autocomplete`: `choices()` and `card_choices()` (at most 25
    suggestions, fonts then toys then layouts).
  - `xpslash.gdpr`: `levels_csv()` and `deletion_message()`.
  - `xpslash.rewards`: `RewardRole`, `format_reward_added()`,
    `format_rewards_deleted()` and `format_reward_list()`.
  - `xpslash.manager`: `ImportUser`, `parse_import()`, `export_json()`,
    `import_summary()` and `reset_confirmed()`.

## Installation

```
pip install .
```

## Usage

Build and check the command list to register with the platform:

```python
from xpslash.registry import admin_commands, get_commands
from xpslash.schema import validate_command

for command in get_commands() + admin_commands():
    validate_command(command)
    payload = command.to_dict()
```

Build a response:

```python
from xpslash.response import SlashResponse

reply = SlashResponse.with_embed_text("Updated card!").ephemeral(True)
body = reply.to_interaction_response()
```

Turn an error into the message a user sees:

```python
from xpslash.errors import ErrorKind, SlashError

response = SlashError(ErrorKind.NO_GUILD_ID).to_response()
```

Render one leaderboard page (pass up to eleven entries; an eleventh only
enables the "Next" button):

```python
from xpslash.leaderboard import LeaderboardEntry, render_leaderboard

page = render_leaderboard([LeaderboardEntry(id=1, level=3)], zpage=0, show_off=False)
print(page.content)
data = page.to_data()
```

Round-trip level data:

```python
from xpslash.manager import ImportUser, export_json, parse_import

users = parse_import(export_json([ImportUser(id=1234, xp=500)]))
```

## What it does not do

The package builds command definitions, response payloads and message text;
it does not run a bot. It has no connection to a chat platform's gateway or
HTTP API, no database for levels, rewards, card settings or guild
configuration, no rank-card image rendering, no level-from-XP calculation
(leaderboard entries take a level already worked out) and no downloading of
import files. `PermissionCache` must be filled by the caller.

## Running the tests

```
pip install .[test]
pytest
```