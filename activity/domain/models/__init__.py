from activity.domain.models.activity_log import ActivityAction, ActivityLog
