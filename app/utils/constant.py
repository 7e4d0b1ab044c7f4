ALLOWED_VIDEO_MIME_TYPES = [
    "video/mp4",
    "video/quicktime",  # .mov from iPhone
    "video/x-msvideo",  # .avi
    "video/x-matroska",  # .mkv
    "video/webm",
    "video/3gpp",  # .3gp
    "video/x-m4v",  # .m4v
]

CORS_ALLOWED_METHODS = "GET, POST, PUT, DELETE, OPTIONS"
CORS_ALLOWED_HEADERS = "Content-Type, Authorization"


ERROR_MESSAGES = {
    "ATHLETE_NOT_FOUND": "Athlete not found",
    "ATHLETE_NAME_EMAIL_REQUIRED": "Name and email are required",
    "ATHLETE_ID_REQUIRED": "Athlete ID is required",
    "ATHLETE_ALREADY_IN_TEAM": "Athlete is already in this team",
    "ATHLETE_NOT_IN_TEAM": "Athlete is not in this team",
    "ATHLETE_ID_QUERY_REQUIRED": "athleteId query parameter is required",
    "ATHLETE_ID_BODY_REQUIRED": "athleteId is required",
    "EMAIL_ALREADY_EXISTS": "Email already exists",
    "TOKEN_REQUIRED": "Token is required",
    "INVALID_TOKEN": "Invalid token",
    "PLAYER_NAME_REQUIRED": "Player name is required",
    "EXERCISE_NOT_FOUND": "Exercise not found",
    "EXERCISE_NAME_REQUIRED": "Exercise name is required",
    "TEAM_NOT_FOUND": "Team not found",
    "TEAM_NAME_REQUIRED": "Team name is required",
    "WORKOUT_NOT_FOUND": "Workout not found",
    "WORKOUT_NAME_DATE_REQUIRED": "Name and date are required",
    "SETS_PAYLOAD_REQUIRED": "athleteId and sets array are required",
    "VIDEO_REQUIRED": "No video file uploaded",
    "VIDEO_INVALID_TYPE": "Invalid file type. Only video files are allowed.",
    "VIDEO_TOO_LARGE": "Video file is too large",
}
