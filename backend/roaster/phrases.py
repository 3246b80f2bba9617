"""Static phrase tables for the template roast generator."""

# --- Resume ---
RESUME_OPENING = (
    "Let me tell you about this resume, folks. I've seen a LOT of resumes, "
    "the best resumes, and this is definitely one of them."
)
RESUME_EDUCATION_INSTITUTION = (
    "{institution}? Nice school, I hear. Not as good as mine. Nobody's school is as good as mine!"
)
RESUME_EDUCATION_PRESENT = (
    "They went to school. Good for them. Probably not a TREMENDOUS school, but okay."
)
RESUME_EDUCATION_ABSENT = (
    "No education listed. ZERO. I went to the best school, and this person can't even name one!"
)
RESUME_EXPERIENCE_COMPANY = (
    "They worked at {company}. {company}! Never heard of it, and I know EVERY company, believe me."
)
RESUME_EXPERIENCE_PRESENT = (
    "Lots of experience, they say. Experience doing WHAT? Nobody knows!"
)
RESUME_EXPERIENCE_ABSENT = (
    "No experience. NONE. Low energy candidate, very low energy!"
)
RESUME_SKILLS_LISTED = (
    "Skills like {skills}? I have those skills too, only MUCH better. Everybody says so."
)
RESUME_SKILLS_PRESENT = (
    "They say they have skills. Everybody says they have skills. SAD!"
)
RESUME_SKILLS_ABSENT = (
    "Where are the skills? I looked and looked. Nothing. A total DISASTER!"
)
RESUME_BUZZWORDS = (
    "And \"{buzzword}\"? Using words like that is what LOSERS do. I have the best words!"
)
RESUME_CLOSING = (
    "Would I hire this person? Let me think about it. YOU'RE FIRED! Just kidding. Maybe."
)

# --- Idea ---
IDEA_OPENING = "So your idea is \"{snippet}\"? Let me tell you something, folks."
IDEA_LENGTH_LONG = (
    "You wrote a whole BOOK about it. Very long, very boring. I don't read that much, I have people for that!"
)
IDEA_LENGTH_MEDIUM = (
    "Decent length. Not great, not terrible. Could be MUCH better, believe me."
)
IDEA_LENGTH_SHORT = (
    "That's it? That's the whole pitch? Very SHORT. Low energy pitch!"
)
IDEA_TOPIC = {
    "has_tech": (
        "Technology, everybody loves technology. Some people say I invented the internet. "
        "But this tech? FAKE tech!"
    ),
    "has_product": (
        "A product! I've sold many products. Steaks, water, the best products. Yours won't sell. SAD!"
    ),
    "has_service": (
        "A service business. Who's going to pay for this service? Not me, and I'm very rich!"
    ),
    "has_finance": (
        "Money stuff, huh? I know more about money than ANYBODY. This is not how you make money."
    ),
}
IDEA_CRITIQUE = {
    "has_market": (
        "Who's your market? You didn't even say! I know markets, and this market DOESN'T EXIST."
    ),
    "has_innovation": (
        "Nothing new here. ZERO innovation. People have been doing this for years!"
    ),
    "is_detailed": (
        "Where are the details? I need details. Big plans need BIG details!"
    ),
}
IDEA_COMPETITORS = (
    "Your competitors are laughing at you right now. Laughing! I can hear them.",
    "Amazon is going to crush this in about five minutes. Maybe four.",
    "I know a guy who tried this. Bankrupt. TOTALLY bankrupt. Very sad story.",
    "There are a hundred companies doing this already, and they're all doing it better. Believe me.",
)
IDEA_APP = (
    "And an APP? Everybody has an app. My grandson has an app. Apps are a dime a dozen, folks!"
)
IDEA_NO_APP = (
    "No app? In this day and age? Even I have an app, and it's the best app!"
)
IDEA_CLOSINGS = (
    "Final verdict: SAD! Go back to the drawing board.",
    "I give it a maybe. A very small maybe. Keep trying!",
    "Make this idea GREAT AGAIN, because right now it's not great at all!",
    "Believe me, this will be a HUGE failure. The biggest. A tremendous failure.",
)

# --- Twitter ---
TWITTER_OPENING = "I just looked at @{handle}. Let me tell you, it's not what I expected."
TWITTER_UNDERSCORES = (
    "All those underscores in @{handle}? Couldn't get the real name, huh? Somebody beat you to it. SAD!"
)
TWITTER_TOO_LONG = (
    "That handle is WAY too long. Nobody can remember it. Mine is short and beautiful!"
)
TWITTER_TOO_SHORT = "Such a short handle. Tiny. Very tiny. Where's the rest of it?"
TWITTER_DEFAULT = "Boring handle. Totally forgettable. I've already forgotten it, actually."
TWITTER_FOLLOWERS = (
    "You have, what, twelve followers? And half of them are your relatives.",
    "Your follower count is a DISASTER. Even my golf caddy has more followers.",
    "Most of your followers are bots, folks. Very sad bots.",
    "I checked your followers. Low energy. Very low energy people.",
)
TWITTER_CONTENT = (
    "Your tweets are FAKE NEWS. Total fake news, and not even good fake news!",
    "Nobody reads your tweets. I asked around. Nobody!",
    "You tweet like a loser. Bad spelling, bad ideas, bad everything.",
    "Your tweets have no energy. I tweet with ENERGY. Big difference.",
    "I've seen your tweets. Boring! Where are the CAPITAL LETTERS?",
)
TWITTER_COMPARE = (
    "I have MILLIONS of followers, the most in history. You? Not so much."
)
TWITTER_ENGAGEMENT = (
    "Your engagement is VERY low. Even the bots don't like your tweets!"
)
TWITTER_CLOSINGS = (
    "Delete your account! Just kidding. Maybe. SAD!",
    "Maybe someday you'll be a great tweeter like me. Probably not, though.",
    "Total failure of an account. Believe me, I know accounts.",
    "Keep tweeting, I guess. Nobody's reading, but keep tweeting!",
)
