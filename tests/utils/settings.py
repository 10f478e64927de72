JWT_SECRET = "integration-test-secret"
ADMIN_KEY = "test-admin-key"
STRONG_PASSWORD = "Str0ng!Pass"
