"""
CSS for the GLYERAL UI.
"""

STYLES = """
<style>
    :root {
        --text-primary: #0f172a;
        --text-muted: #64748b;
        --border-subtle: #e2e8f0;
        --radius-md: 8px;
    }

    .rec-card {
        border-left: 4px solid var(--border-subtle);
        border-radius: var(--radius-md);
        padding: 0.5rem 0.75rem;
        margin-bottom: 0.5rem;
        background: #f8fafc;
    }

    .rec-class {
        color: var(--text-muted);
        font-size: 0.8rem;
    }

    .rec-dose {
        color: var(--text-primary);
        font-family: ui-monospace, monospace;
        font-size: 0.9rem;
    }

    .app-header {
        display: flex;
        justify-content: space-between;
        align-items: center;
        margin-bottom: 1.5rem;
        padding-bottom: 1rem;
        border-bottom: 1px solid var(--border-subtle);
    }

    .app-header h1 {
        font-size: 1.5rem;
        font-weight: 600;
        margin: 0;
    }

    .app-header p {
        font-size: 0.85rem;
        color: var(--text-muted);
        margin: 0.25rem 0 0 0;
    }
</style>
"""
