"""GitHub Gateway - GitHub REST APIの薄いアダプター"""
