"""
News templates keyed by (trait, confidence level).

Stories hint at behavior the public can observe. No line may name a trait
or use the word "trait"; find_disclosure_violations() enforces that.

Slots: {player_name}, {team_name}, plus any metadata key passed by the
caller (e.g. {consecutive_games}).
"""

from dataclasses import dataclass

from ..state.schema import ConfidenceLevel, NewsCategory, NewsPriority, Trait

C = NewsCategory
P = NewsPriority
L = ConfidenceLevel


@dataclass(frozen=True)
class NewsTemplate:
    """Interchangeable headlines and bodies for one (trait, confidence) pair."""
    trait: Trait
    confidence_level: ConfidenceLevel
    headlines: tuple[str, ...]
    bodies: tuple[str, ...]
    category: NewsCategory
    priority: NewsPriority


# =============================================================================
# Positive traits
# =============================================================================

CLUTCH_TEMPLATES = [
    NewsTemplate(
        Trait.CLUTCH, L.HINT,
        headlines=(
            "{player_name} Comes Through Late",
            "Fourth Quarter Surge Led by {player_name}",
        ),
        bodies=(
            "{player_name} made several key plays in the fourth quarter, helping {team_name} secure the win.",
            "When the game was on the line, {player_name} stepped up with big plays down the stretch.",
        ),
        category=C.GAME_RECAP, priority=P.MEDIUM,
    ),
    NewsTemplate(
        Trait.CLUTCH, L.MODERATE,
        headlines=(
            "{player_name} Developing a Reputation for Big Moments",
            "Teammates Praise {player_name}'s Late-Game Heroics",
        ),
        bodies=(
            "For the third time this season, {player_name} has delivered in crunch time. "
            "\"Some guys just have it,\" said one teammate.",
            "{player_name} continues to make plays when they matter most. Scouts are taking notice of the pattern.",
        ),
        category=C.PLAYER_PROFILE, priority=P.HIGH,
    ),
    NewsTemplate(
        Trait.CLUTCH, L.CONFIRMED,
        headlines=(
            "No Stage Too Big for {player_name}",
            "{player_name} Owns the Final Two Minutes",
        ),
        bodies=(
            "{player_name} has now made game-winning plays in multiple big games. There is no questioning "
            "this player's ability to deliver when everything is on the line.",
            "From the regular season to the playoffs, {player_name} consistently elevates when the stakes "
            "are highest. A true big-game performer.",
        ),
        category=C.BREAKING, priority=P.URGENT,
    ),
]

IRON_MAN_TEMPLATES = [
    NewsTemplate(
        Trait.IRON_MAN, L.HINT,
        headlines=(
            "{player_name} Available Despite Minor Injury",
            "{player_name} Plays Through Pain",
        ),
        bodies=(
            "Despite nursing a minor injury, {player_name} suited up and performed at a high level.",
            "{player_name} returned to practice quickly after a minor setback, impressing the coaching staff.",
        ),
        category=C.INJURY_REPORT, priority=P.LOW,
    ),
    NewsTemplate(
        Trait.IRON_MAN, L.MODERATE,
        headlines=(
            "{player_name}'s Streak Continues",
            "Availability a Calling Card for {player_name}",
        ),
        bodies=(
            "{player_name} hasn't missed a game in over two seasons. That kind of availability is "
            "becoming increasingly rare.",
            "While others deal with setbacks, {player_name} keeps showing up week after week. "
            "Coaches love the reliability.",
        ),
        category=C.PLAYER_PROFILE, priority=P.MEDIUM,
    ),
    NewsTemplate(
        Trait.IRON_MAN, L.CONFIRMED,
        headlines=(
            "{player_name}: {consecutive_games} Straight Games and Counting",
            "Unprecedented Durability: {player_name}'s Remarkable Streak",
            "{player_name} Never Misses a Snap",
        ),
        bodies=(
            "With {consecutive_games} consecutive games played, {player_name} has set a standard of "
            "durability few in the league can match.",
            "{player_name}'s durability is unmatched. Multiple full seasons without missing a game speak "
            "to elite conditioning and toughness.",
        ),
        category=C.PLAYER_PROFILE, priority=P.HIGH,
    ),
]

LEADER_TEMPLATES = [
    NewsTemplate(
        Trait.LEADER, L.HINT,
        headlines=(
            "{player_name} Speaks Up in Team Meeting",
            "Teammates Respond to {player_name}'s Challenge",
        ),
        bodies=(
            "Sources say {player_name} addressed the team after a tough loss. The response was positive.",
            "{player_name} has started taking on a more vocal role in the locker room, earning respect "
            "from veterans.",
        ),
        category=C.INSIDER_SCOOP, priority=P.MEDIUM,
    ),
    NewsTemplate(
        Trait.LEADER, L.MODERATE,
        headlines=(
            "{player_name} Becoming the Voice of the Locker Room",
            "Coaches Lean on {player_name} to Set the Tone",
        ),
        bodies=(
            "Despite not wearing a captain's patch, {player_name} has become a go-to voice for the "
            "coaching staff.",
            "Multiple teammates have credited {player_name} with helping them through difficult stretches.",
        ),
        category=C.PLAYER_PROFILE, priority=P.HIGH,
    ),
    NewsTemplate(
        Trait.LEADER, L.CONFIRMED,
        headlines=(
            "{player_name}: A True Captain",
            "{player_name} Reshapes the Culture at {team_name}",
        ),
        bodies=(
            "{player_name} has become the unquestioned heart of {team_name}. Teammates and coaches alike "
            "point to the impact on team culture.",
            "The transformation of this roster starts with {player_name}, whose influence extends far "
            "beyond the field.",
        ),
        category=C.PLAYER_PROFILE, priority=P.URGENT,
    ),
]

FILM_JUNKIE_TEMPLATES = [
    NewsTemplate(
        Trait.FILM_JUNKIE, L.HINT,
        headlines=(
            "{player_name} First In, Last Out",
            "Extra Hours for {player_name}",
        ),
        bodies=(
            "Coaches note that {player_name} is often found in the film room well after team meetings end.",
            "{player_name} has been putting in extra preparation time this week, studying opponent tendencies.",
        ),
        category=C.PRACTICE_REPORT, priority=P.LOW,
    ),
    NewsTemplate(
        Trait.FILM_JUNKIE, L.MODERATE,
        headlines=(
            "{player_name}'s Film Study Paying Dividends",
            "Preparation Key to {player_name}'s Success",
        ),
        bodies=(
            "\"They always know what's coming before it happens,\" said one coach about "
            "{player_name}'s preparation.",
            "{player_name}'s ability to read plays before they develop comes from hours in the film room.",
        ),
        category=C.PLAYER_PROFILE, priority=P.MEDIUM,
    ),
    NewsTemplate(
        Trait.FILM_JUNKIE, L.CONFIRMED,
        headlines=(
            "{player_name}: A True Student of the Game",
            "Inside {player_name}'s Obsessive Preparation",
        ),
        bodies=(
            "Coaches marvel at {player_name}'s dedication to studying tape. The preparation is unmatched "
            "in the league.",
            "{player_name} studies more film than anyone on {team_name}, and it shows on game day.",
        ),
        category=C.PLAYER_PROFILE, priority=P.HIGH,
    ),
]

COOL_UNDER_PRESSURE_TEMPLATES = [
    NewsTemplate(
        Trait.COOL_UNDER_PRESSURE, L.HINT,
        headlines=(
            "{player_name} Unfazed by Hostile Crowd",
            "Steady Hand from {player_name}",
        ),
        bodies=(
            "{player_name} never looked rattled, even as the noise reached its peak late in the game.",
            "With the game tightening, {player_name} kept making the simple, correct play.",
        ),
        category=C.GAME_RECAP, priority=P.LOW,
    ),
    NewsTemplate(
        Trait.COOL_UNDER_PRESSURE, L.MODERATE,
        headlines=(
            "Nothing Seems to Rattle {player_name}",
            "{player_name}'s Calm Spreads Through the Huddle",
        ),
        bodies=(
            "Teammates describe {player_name} as the calmest voice in the huddle when the game gets tight.",
            "Big stage, big moment, same demeanor. {player_name} continues to play with remarkable composure.",
        ),
        category=C.PLAYER_PROFILE, priority=P.MEDIUM,
    ),
    NewsTemplate(
        Trait.COOL_UNDER_PRESSURE, L.CONFIRMED,
        headlines=(
            "Ice in the Veins: {player_name} Does It Again",
            "{player_name}'s Composure Is Now a Weapon",
        ),
        bodies=(
            "Opponents have stopped trying to get under {player_name}'s skin. The composure in tight "
            "spots is simply part of who this player is.",
            "Whether it is the playoffs or a primetime stage, {player_name} plays with the same "
            "unshakable calm.",
        ),
        category=C.PLAYER_PROFILE, priority=P.HIGH,
    ),
]

MOTOR_TEMPLATES = [
    NewsTemplate(
        Trait.MOTOR, L.HINT,
        headlines=(
            "{player_name} Turns Heads at Practice",
            "Full Speed Every Rep for {player_name}",
        ),
        bodies=(
            "{player_name} was still sprinting to the ball on the final snap of a long practice.",
            "Coaches pointed to {player_name}'s hustle during a grueling session this week.",
        ),
        category=C.PRACTICE_REPORT, priority=P.LOW,
    ),
    NewsTemplate(
        Trait.MOTOR, L.MODERATE,
        headlines=(
            "{player_name} Never Takes a Play Off",
            "Relentless Effort Defines {player_name}",
        ),
        bodies=(
            "Film shows {player_name} chasing plays from the backside long after others have given up.",
            "\"You never have to ask for more,\" one coach said of {player_name}'s effort level.",
        ),
        category=C.PLAYER_PROFILE, priority=P.MEDIUM,
    ),
    NewsTemplate(
        Trait.MOTOR, L.CONFIRMED,
        headlines=(
            "{player_name}'s Engine Never Stops",
            "The Hardest Worker on {team_name}",
        ),
        bodies=(
            "Week after week, {player_name} plays every snap as if it were the last. That relentless "
            "energy has become a standard for {team_name}.",
            "{player_name} has set the tone with effort that never wavers, from the first practice in "
            "camp to the final whistle of the season.",
        ),
        category=C.PLAYER_PROFILE, priority=P.HIGH,
    ),
]

TEAM_FIRST_TEMPLATES = [
    NewsTemplate(
        Trait.TEAM_FIRST, L.HINT,
        headlines=(
            "{player_name} Deflects Credit After Win",
            "{player_name} Praises Teammates",
        ),
        bodies=(
            "Asked about a big performance, {player_name} spent the entire press conference talking "
            "about the offensive line.",
            "{player_name} was quick to share credit with teammates after the win.",
        ),
        category=C.INSIDER_SCOOP, priority=P.LOW,
    ),
    NewsTemplate(
        Trait.TEAM_FIRST, L.MODERATE,
        headlines=(
            "{player_name} Open to a Smaller Role",
            "Contract Talks Smooth with {player_name}",
        ),
        bodies=(
            "Sources say {player_name} told coaches to do whatever helps {team_name} win, even if it "
            "means fewer touches.",
            "{player_name}'s camp has reportedly been flexible in negotiations to leave room for keeping "
            "the roster together.",
        ),
        category=C.PLAYER_PROFILE, priority=P.MEDIUM,
    ),
    NewsTemplate(
        Trait.TEAM_FIRST, L.CONFIRMED,
        headlines=(
            "{player_name} Takes a Discount to Keep the Core Together",
            "Selfless to the Core: {player_name}",
        ),
        bodies=(
            "{player_name} has repeatedly put {team_name} ahead of personal numbers and paydays. "
            "Teammates notice.",
            "From restructured deals to a willingness to block for others, {player_name} has made a "
            "habit of sacrifice.",
        ),
        category=C.PLAYER_PROFILE, priority=P.HIGH,
    ),
]

SCHEME_VERSATILE_TEMPLATES = [
    NewsTemplate(
        Trait.SCHEME_VERSATILE, L.HINT,
        headlines=(
            "{player_name} Picks Up New Playbook Quickly",
            "Smooth Transition for {player_name}",
        ),
        bodies=(
            "Coaches say {player_name} has absorbed the new system faster than expected.",
            "{player_name} looked comfortable in the new looks installed this week.",
        ),
        category=C.PRACTICE_REPORT, priority=P.LOW,
    ),
    NewsTemplate(
        Trait.SCHEME_VERSATILE, L.MODERATE,
        headlines=(
            "{player_name} Thriving in the New System",
            "Any Role, Any Look for {player_name}",
        ),
        bodies=(
            "The new coordinator has moved {player_name} all over the formation, and the production "
            "has not dipped.",
            "{player_name} seems to fit whatever the staff draws up.",
        ),
        category=C.PLAYER_PROFILE, priority=P.MEDIUM,
    ),
    NewsTemplate(
        Trait.SCHEME_VERSATILE, L.CONFIRMED,
        headlines=(
            "{player_name} Fits Any System",
            "Plug and Play: {player_name}'s Adaptability Stands Out",
        ),
        bodies=(
            "Across multiple coordinators and playbooks, {player_name} has produced at a high level every time.",
            "Whatever scheme {team_name} runs, {player_name} finds a way to excel in it.",
        ),
        category=C.PLAYER_PROFILE, priority=P.HIGH,
    ),
]


# =============================================================================
# Negative traits
# =============================================================================

CHOKES_TEMPLATES = [
    NewsTemplate(
        Trait.CHOKES, L.HINT,
        headlines=(
            "{player_name} Quiet in Critical Moment",
            "Missed Opportunity for {player_name}",
        ),
        bodies=(
            "{player_name} was unable to come through when the team needed it most in the fourth quarter.",
            "A key drop by {player_name} proved costly as {team_name} fell short in the closing minutes.",
        ),
        category=C.GAME_RECAP, priority=P.MEDIUM,
    ),
    NewsTemplate(
        Trait.CHOKES, L.MODERATE,
        headlines=(
            "Questions Arise About {player_name} in Big Moments",
            "{player_name}'s Late-Game Struggles Continue",
        ),
        bodies=(
            "For the second time in a crucial game, {player_name} failed to deliver when it mattered most.",
            "A pattern may be emerging: {player_name} has struggled to make plays when the game is on the line.",
        ),
        category=C.GAME_RECAP, priority=P.HIGH,
    ),
    NewsTemplate(
        Trait.CHOKES, L.CONFIRMED,
        headlines=(
            "{player_name}'s Playoff Struggles Continue",
            "Can {player_name} Overcome Big-Game Issues?",
        ),
        bodies=(
            "Multiple playoff failures have raised serious concerns about {player_name}'s ability to "
            "perform when it counts.",
            "The numbers don't lie: {player_name}'s production drops sharply when the stakes are highest.",
        ),
        category=C.PLAYER_PROFILE, priority=P.URGENT,
    ),
]

INJURY_PRONE_TEMPLATES = [
    NewsTemplate(
        Trait.INJURY_PRONE, L.HINT,
        headlines=(
            "{player_name} Day-to-Day with Injury",
            "{player_name} Misses Practice",
        ),
        bodies=(
            "{player_name} is dealing with another minor injury and may miss time.",
            "The training staff is working with {player_name} on recovery from the latest setback.",
        ),
        category=C.INJURY_REPORT, priority=P.LOW,
    ),
    NewsTemplate(
        Trait.INJURY_PRONE, L.MODERATE,
        headlines=(
            "Injury Concerns Mount for {player_name}",
            "{player_name}'s Availability Uncertain Again",
        ),
        bodies=(
            "This marks another significant injury for {player_name} in the past two seasons. "
            "Durability is becoming a concern.",
            "{player_name} is back on the injury report. The pattern of setbacks is troubling for team planners.",
        ),
        category=C.INJURY_REPORT, priority=P.MEDIUM,
    ),
    NewsTemplate(
        Trait.INJURY_PRONE, L.CONFIRMED,
        headlines=(
            "{player_name} Sidelined Again: Durability a Major Concern",
            "Injury History Clouds {player_name}'s Future",
        ),
        bodies=(
            "{player_name} has now missed significant time in multiple seasons. The medical file is "
            "extensive and concerning.",
            "Despite the talent, {player_name}'s inability to stay healthy has become a defining part "
            "of this career.",
        ),
        category=C.INJURY_REPORT, priority=P.HIGH,
    ),
]

HOT_HEAD_TEMPLATES = [
    NewsTemplate(
        Trait.HOT_HEAD, L.HINT,
        headlines=(
            "{player_name} Flagged for Personal Foul",
            "Tempers Flare for {player_name}",
        ),
        bodies=(
            "{player_name} was flagged for an unnecessary roughness penalty late in the game.",
            "An exchange between {player_name} and an opponent required officials to intervene.",
        ),
        category=C.GAME_RECAP, priority=P.LOW,
    ),
    NewsTemplate(
        Trait.HOT_HEAD, L.MODERATE,
        headlines=(
            "{player_name} Involved in Practice Scuffle",
            "Discipline Issues for {player_name}?",
        ),
        bodies=(
            "Sources report {player_name} was involved in a confrontation at practice. Teammates had to "
            "separate the parties.",
            "Coaches are monitoring {player_name}'s temperament after multiple penalty issues this season.",
        ),
        category=C.PRACTICE_REPORT, priority=P.MEDIUM,
    ),
    NewsTemplate(
        Trait.HOT_HEAD, L.CONFIRMED,
        headlines=(
            "{player_name} Ejected After Altercation",
            "Pattern of Behavior: {player_name}'s Discipline Problems",
        ),
        bodies=(
            "{player_name} was ejected after a confrontation. This is not an isolated incident.",
            "Multiple ejections and penalties have made it clear: {player_name} struggles to keep "
            "emotions in check.",
        ),
        category=C.BREAKING, priority=P.URGENT,
    ),
]

LAZY_TEMPLATES = [
    NewsTemplate(
        Trait.LAZY, L.HINT,
        headlines=(
            "{player_name} Rested at Practice",
            "Light Workload for {player_name}",
        ),
        bodies=(
            "{player_name} sat out portions of practice this week. Coaches cite \"maintenance.\"",
            "{player_name} has been managing the workload carefully this season.",
        ),
        category=C.PRACTICE_REPORT, priority=P.LOW,
    ),
    NewsTemplate(
        Trait.LAZY, L.MODERATE,
        headlines=(
            "Coaches Want More from {player_name}",
            "{player_name}'s Effort Questioned",
        ),
        bodies=(
            "Sources indicate the coaching staff has addressed {player_name}'s practice habits behind "
            "closed doors.",
            "Some wonder if {player_name} is maximizing considerable talent with this approach to preparation.",
        ),
        category=C.INSIDER_SCOOP, priority=P.MEDIUM,
    ),
    NewsTemplate(
        Trait.LAZY, L.CONFIRMED,
        headlines=(
            "{player_name}'s Work Ethic Under Scrutiny",
            "Talent vs. Effort: The {player_name} Question",
        ),
        bodies=(
            "Multiple sources have confirmed concerns about {player_name}'s approach to practice and film study.",
            "Despite clear physical gifts, {player_name}'s development has been hampered by questions "
            "about dedication.",
        ),
        category=C.PLAYER_PROFILE, priority=P.HIGH,
    ),
]

LOCKER_ROOM_CANCER_TEMPLATES = [
    NewsTemplate(
        Trait.LOCKER_ROOM_CANCER, L.HINT,
        headlines=(
            "Awkward Silence After {player_name}'s Comments",
            "{player_name} Skips Team Dinner",
        ),
        bodies=(
            "Several teammates declined to comment when asked about {player_name}'s remarks in the meeting room.",
            "{player_name} was noticeably absent from a team-bonding event this week.",
        ),
        category=C.INSIDER_SCOOP, priority=P.LOW,
    ),
    NewsTemplate(
        Trait.LOCKER_ROOM_CANCER, L.MODERATE,
        headlines=(
            "Friction Building Around {player_name}",
            "Teammates Frustrated with {player_name}",
        ),
        bodies=(
            "Sources describe growing tension between {player_name} and several veterans.",
            "Multiple players have privately voiced frustration over {player_name}'s attitude.",
        ),
        category=C.INSIDER_SCOOP, priority=P.MEDIUM,
    ),
    NewsTemplate(
        Trait.LOCKER_ROOM_CANCER, L.CONFIRMED,
        headlines=(
            "{player_name} Splitting the Locker Room",
            "Chemistry Crumbling Around {player_name}",
        ),
        bodies=(
            "What started as grumbling has become a full rift, with {player_name} at the center of it.",
            "Coaches have run out of answers as the atmosphere around {player_name} continues to sour "
            "the room at {team_name}.",
        ),
        category=C.BREAKING, priority=P.HIGH,
    ),
]

GLASS_HANDS_TEMPLATES = [
    NewsTemplate(
        Trait.GLASS_HANDS, L.HINT,
        headlines=(
            "{player_name} Drops a Catchable Ball",
            "Ball Security Slip for {player_name}",
        ),
        bodies=(
            "{player_name} let an easy pass slip through in the second quarter.",
            "A fumble by {player_name} gave the opponent a short field.",
        ),
        category=C.GAME_RECAP, priority=P.LOW,
    ),
    NewsTemplate(
        Trait.GLASS_HANDS, L.MODERATE,
        headlines=(
            "Drops Piling Up for {player_name}",
            "{player_name}'s Ball Security in Question",
        ),
        bodies=(
            "{player_name} has put the ball on the turf several times this season, and coaches are noticing.",
            "Another drop for {player_name} adds to a growing list of missed chances.",
        ),
        category=C.GAME_RECAP, priority=P.MEDIUM,
    ),
    NewsTemplate(
        Trait.GLASS_HANDS, L.CONFIRMED,
        headlines=(
            "{player_name}'s Hands Now a Liability",
            "Can {team_name} Trust {player_name} with the Ball?",
        ),
        bodies=(
            "The drops and fumbles are no longer a slump. {player_name}'s ball security is a genuine problem.",
            "Quarterbacks have started looking elsewhere on key downs. Too many balls have hit the ground "
            "around {player_name}.",
        ),
        category=C.GAME_RECAP, priority=P.HIGH,
    ),
]

DISAPPEARS_TEMPLATES = [
    NewsTemplate(
        Trait.DISAPPEARS, L.HINT,
        headlines=(
            "{player_name} Held in Check",
            "Quiet Night for {player_name}",
        ),
        bodies=(
            "{player_name} was barely noticeable in a game {team_name} needed to win.",
            "The big stage came and went without much from {player_name}.",
        ),
        category=C.GAME_RECAP, priority=P.LOW,
    ),
    NewsTemplate(
        Trait.DISAPPEARS, L.MODERATE,
        headlines=(
            "Where Was {player_name}?",
            "{player_name} Invisible Again in a Big Game",
        ),
        bodies=(
            "For the second straight big game, {player_name} failed to make an impact.",
            "Fans are starting to ask why {player_name} fades when the spotlight is brightest.",
        ),
        category=C.GAME_RECAP, priority=P.MEDIUM,
    ),
    NewsTemplate(
        Trait.DISAPPEARS, L.CONFIRMED,
        headlines=(
            "{player_name} Vanishes When It Counts",
            "Big Games, Small Impact: The {player_name} Problem",
        ),
        bodies=(
            "The pattern is unmistakable: the bigger the game, the smaller {player_name}'s footprint.",
            "{player_name} puts up numbers in September and goes missing in January.",
        ),
        category=C.PLAYER_PROFILE, priority=P.HIGH,
    ),
]

SYSTEM_DEPENDENT_TEMPLATES = [
    NewsTemplate(
        Trait.SYSTEM_DEPENDENT, L.HINT,
        headlines=(
            "{player_name} Adjusting to New Playbook",
            "Growing Pains for {player_name}",
        ),
        bodies=(
            "{player_name} looked a step behind while learning the new system this week.",
            "Coaches say {player_name} is still getting comfortable with the new terminology.",
        ),
        category=C.PRACTICE_REPORT, priority=P.LOW,
    ),
    NewsTemplate(
        Trait.SYSTEM_DEPENDENT, L.MODERATE,
        headlines=(
            "{player_name} Struggling Since the Scheme Change",
            "New System, Less Production for {player_name}",
        ),
        bodies=(
            "{player_name}'s production has dipped noticeably since the staff changed the offense.",
            "Scouts wonder whether {player_name} can succeed outside of one specific system.",
        ),
        category=C.INSIDER_SCOOP, priority=P.MEDIUM,
    ),
    NewsTemplate(
        Trait.SYSTEM_DEPENDENT, L.CONFIRMED,
        headlines=(
            "{player_name} a Product of the Old Playbook?",
            "Without the Right Scheme, {player_name} Fades",
        ),
        bodies=(
            "Outside the scheme where it all clicked, {player_name} has never looked the same.",
            "The evidence is in: {player_name} thrives in one kind of offense and struggles everywhere else.",
        ),
        category=C.PLAYER_PROFILE, priority=P.HIGH,
    ),
]

DIVA_TEMPLATES = [
    NewsTemplate(
        Trait.DIVA, L.HINT,
        headlines=(
            "{player_name} Addresses Media After Loss",
            "{player_name}'s Comments Raise Eyebrows",
        ),
        bodies=(
            "{player_name} made some pointed comments about the offense following the loss.",
            "Some are reading between the lines of {player_name}'s post-game interview.",
        ),
        category=C.INSIDER_SCOOP, priority=P.LOW,
    ),
    NewsTemplate(
        Trait.DIVA, L.MODERATE,
        headlines=(
            "{player_name} Wants More Targets",
            "Contract Talks Stall for {player_name}",
        ),
        bodies=(
            "{player_name} publicly expressed frustration with the current role. Coaches declined to comment.",
            "Sources say {player_name}'s contract demands are causing friction with the front office.",
        ),
        category=C.INSIDER_SCOOP, priority=P.MEDIUM,
    ),
    NewsTemplate(
        Trait.DIVA, L.CONFIRMED,
        headlines=(
            "{player_name} Creates Drama Again",
            "Can {team_name} Manage {player_name}'s Ego?",
        ),
        bodies=(
            "Another week, another controversy surrounding {player_name}. The attention-seeking is well "
            "established.",
            "{player_name}'s talent is undeniable, but the constant drama has become a distraction for "
            "{team_name}.",
        ),
        category=C.BREAKING, priority=P.HIGH,
    ),
]


ALL_TEMPLATES: list[NewsTemplate] = [
    *CLUTCH_TEMPLATES,
    *IRON_MAN_TEMPLATES,
    *LEADER_TEMPLATES,
    *FILM_JUNKIE_TEMPLATES,
    *COOL_UNDER_PRESSURE_TEMPLATES,
    *MOTOR_TEMPLATES,
    *TEAM_FIRST_TEMPLATES,
    *SCHEME_VERSATILE_TEMPLATES,
    *CHOKES_TEMPLATES,
    *INJURY_PRONE_TEMPLATES,
    *HOT_HEAD_TEMPLATES,
    *LAZY_TEMPLATES,
    *LOCKER_ROOM_CANCER_TEMPLATES,
    *GLASS_HANDS_TEMPLATES,
    *DISAPPEARS_TEMPLATES,
    *SYSTEM_DEPENDENT_TEMPLATES,
    *DIVA_TEMPLATES,
]

TEMPLATE_INDEX: dict[tuple[Trait, ConfidenceLevel], NewsTemplate] = {
    (t.trait, t.confidence_level): t for t in ALL_TEMPLATES
}


def disclosure_terms(trait: Trait) -> set[str]:
    """Every spelling of a trait identifier a story must avoid."""
    value = trait.value
    return {value, value.replace("_", " "), value.replace("_", "")}


def find_disclosure_violations(templates: list[NewsTemplate] | None = None) -> list[str]:
    """
    Audit the template bank for lines that would label a trait.

    Checks every line against every trait identifier and the word "trait".

    Returns:
        Descriptions of offending lines (empty if the bank is clean)
    """
    forbidden = {"trait"}
    for trait in Trait:
        forbidden |= disclosure_terms(trait)

    violations = []
    for template in templates if templates is not None else ALL_TEMPLATES:
        for line in template.headlines + template.bodies:
            lowered = line.lower()
            for term in sorted(forbidden):
                if term in lowered:
                    violations.append(
                        f"{template.trait.value}/{template.confidence_level.value}: "
                        f"'{term}' in \"{line}\""
                    )
    return violations
