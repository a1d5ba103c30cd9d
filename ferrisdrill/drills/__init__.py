"""Worked solutions for the course exercises, grouped by topic."""